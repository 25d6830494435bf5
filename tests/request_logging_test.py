"""
Tests for the per-request log line and the storage-error log level.
"""
from domain.exceptions import DataAccessError


def test_each_request_logs_method_status_path_and_session(client, mocker):
    logging_port = mocker.patch("app.main.logging_port")

    response = client.get("/health", headers={"Cookie": "session_id=abc123"})

    assert response.status_code == 200
    logging_port.bind.assert_called_once_with(step="http")
    logging_port.bind.return_value.info.assert_called_once_with(
        "http_request",
        method="GET",
        status=200,
        path="/health",
        session_id="abc123",
    )


def test_request_log_records_error_status(seeded, client, mocker):
    logging_port = mocker.patch("app.main.logging_port")

    client.get("/withdraw", params={"id": 999})

    kwargs = logging_port.bind.return_value.info.call_args.kwargs
    assert kwargs["status"] == 404
    assert kwargs["path"] == "/withdraw"
    assert kwargs["session_id"] is None


def test_storage_failure_is_not_logged_as_a_second_error(seeded, client, mocker):
    logging_port = mocker.patch("app.main.logging_port")
    mocker.patch(
        "application.service.application_service.ApplicationService.get_user_by_id",
        side_effect=DataAccessError("user_dao.find_by_id failed", operation="find_by_id"),
    )

    response = client.get("/withdraw", params={"id": 1})

    assert response.status_code == 500
    bound = logging_port.bind.return_value
    bound.error.assert_not_called()
    bound.warning.assert_called_once_with(
        "request_aborted_by_storage_error",
        method="GET",
        path="/withdraw",
        operation="find_by_id",
    )
