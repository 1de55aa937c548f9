from sqlgen.security import REDACTED_VALUE, is_sensitive_name, redact_params, redact_value


def test_sensitive_names_match_generated_parameter_names():
    assert is_sensitive_name("Password_p0")
    assert is_sensitive_name("ApiKey3")
    assert is_sensitive_name("access_token_1")
    assert not is_sensitive_name("Name_p0")


def test_redact_params_masks_sensitive_entries():
    params = {"Name_p0": "Ann", "Password_p1": "hunter2", "Note_p2": "Bearer abc"}
    assert redact_params(params) == {
        "Name_p0": "Ann",
        "Password_p1": REDACTED_VALUE,
        "Note_p2": REDACTED_VALUE,
    }
    assert params["Password_p1"] == "hunter2"


def test_redact_params_handles_empty_bag():
    assert redact_params(None) == {}
    assert redact_params({}) == {}


def test_redact_value_recurses_into_collections():
    assert redact_value(["ok", "my secret"]) == ["ok", REDACTED_VALUE]
    assert redact_value({"token": "x", "n": 1}) == {"token": REDACTED_VALUE, "n": 1}
