from sz_shared import (
    SZENGINE_COMPONENT_ID,
    SzBadInputError,
    SzError,
    SzSdkError,
    format_message_id,
)


def test_format_message_id_pads_component_and_number():
    assert format_message_id(6034, 8001) == "SZSDK60348001"
    assert format_message_id(6031, 1) == "SZSDK60310001"


def test_error_code_requires_component_and_number():
    assert SzError("boom").error_code is None
    assert SzError("boom", SZENGINE_COMPONENT_ID).error_code is None
    err = SzSdkError("boom", SZENGINE_COMPONENT_ID, 4001)
    assert err.error_code == "SZSDK60344001"
    assert str(err) == "SZSDK60344001: boom"


def test_bad_input_is_a_value_error():
    err = SzBadInputError("invalid log level: BOGUS", 6031)
    assert isinstance(err, ValueError)
    assert isinstance(err, SzError)
    assert str(err) == "invalid log level: BOGUS"
