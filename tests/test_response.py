# tests/test_response.py

from core.response import ErrorCode, Response


def test_succeed_response():
    response = Response.succeed(detail="done", data={"record": 1})

    assert response.success
    assert response.error is None
    assert response.status_code == 200
    assert response.data == {"record": 1}
    assert str(response) == "Success: done"


def test_fail_response():
    response = Response.fail(
        detail="Course has already been added",
        error=ErrorCode.DUPLICATE_RECORD,
        status_code=409,
    )

    assert not response.success
    assert response.data == {}
    assert str(response) == "Error: DUPLICATE_RECORD"
    assert response.to_dict() == {
        "success": False,
        "error": "DUPLICATE_RECORD",
        "detail": "Course has already been added",
        "data": {},
        "status_code": 409,
    }
