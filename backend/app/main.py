from typing import Optional, Union

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

from rref.config import ReduceConfig
from rref.engine import solve_rref

app = FastAPI(title="RREF LaTeX API")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

MatrixInput = Union[str, list[list[float]]]


class ReduceRequest(BaseModel):
    matrix: MatrixInput
    rhs: Optional[MatrixInput] = None
    show_all_steps: bool = False
    number_format: str = "%.3f"


class StepInfo(BaseModel):
    step_number: int
    description: str
    expression: str
    explanation: str


class ReduceResponse(BaseModel):
    given: dict
    method: dict
    steps: list[StepInfo]
    final_answer: dict
    latex: str
    summary: dict


@app.post("/api/reduce", response_model=ReduceResponse)
def reduce_matrix(req: ReduceRequest):
    if isinstance(req.matrix, str) and not req.matrix.strip():
        raise HTTPException(status_code=400, detail="Matrix cannot be empty.")

    try:
        config = ReduceConfig(show_all_steps=req.show_all_steps,
                              number_format=req.number_format)
        result = solve_rref(req.matrix, req.rhs, config)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Reduction error: {str(e)}")

    return result
