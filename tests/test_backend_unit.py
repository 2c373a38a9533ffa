from fastapi.testclient import TestClient

from backend.app.main import app

client = TestClient(app)


def test_reduce_text_matrix() -> None:
    resp = client.post("/api/reduce", json={"matrix": "4 3; 6 3"})
    assert resp.status_code == 200
    body = resp.json()
    assert body["summary"]["total_steps"] == 5
    assert body["steps"][0]["description"] == "Original Matrix"
    assert body["latex"].endswith("\\end{flalign}\n")


def test_reduce_list_matrix_with_rhs() -> None:
    resp = client.post("/api/reduce", json={
        "matrix": [[0, 2], [1, 1]],
        "rhs": [[1], [2]],
        "show_all_steps": True,
        "number_format": "%.2f",
    })
    assert resp.status_code == 200
    body = resp.json()
    assert body["steps"][1]["description"] == "row 1 ↔ row 2"
    assert body["final_answer"]["augment"] == [["1.50"], ["0.50"]]
    assert body["method"]["parameters"]["show_all_steps"] is True


def test_dimension_mismatch_is_bad_request() -> None:
    resp = client.post("/api/reduce", json={"matrix": "1 2; 3 4", "rhs": "1; 2; 3"})
    assert resp.status_code == 400
    assert "same number of rows" in resp.json()["detail"]


def test_empty_matrix_is_bad_request() -> None:
    resp = client.post("/api/reduce", json={"matrix": "   "})
    assert resp.status_code == 400
    assert "empty" in resp.json()["detail"]


def test_invalid_number_format_is_bad_request() -> None:
    resp = client.post("/api/reduce", json={"matrix": "1 0; 0 1", "number_format": "abc"})
    assert resp.status_code == 400
    assert "Invalid number format" in resp.json()["detail"]
