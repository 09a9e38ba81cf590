from festival.core.errors import (
    STATUS_CODES,
    BoothNotFoundError,
    ErrorCode,
    EventNotFoundError,
    FestivalError,
    IdGenerationError,
    StoreBusyError,
    ValidationError,
)


def test_all_error_codes_have_status():
    for code in ErrorCode:
        assert code in STATUS_CODES


def test_status_codes():
    assert ValidationError("bad").status_code == 400
    assert EventNotFoundError().status_code == 404
    assert BoothNotFoundError().status_code == 404
    assert StoreBusyError().status_code == 503
    assert IdGenerationError("exhausted").status_code == 500


def test_default_messages():
    assert EventNotFoundError().message == "Event not found"
    assert BoothNotFoundError().message == "Booth not found"
    assert str(ValidationError("eventName is required")) == "eventName is required"


def test_subclasses_share_base():
    for exc in (ValidationError("x"), EventNotFoundError(), BoothNotFoundError(), StoreBusyError()):
        assert isinstance(exc, FestivalError)
