from pr_labeler.infrastructure.observability import redact_mapping, redact_text
from pr_labeler.infrastructure.observability.redaction_service import REDACTED, redaction_processor


class TestRedactText:
    def test_bearer_token(self) -> None:
        assert redact_text("Authorization failed for Bearer abc.def-123") == f"Authorization failed for Bearer {REDACTED}"

    def test_github_tokens(self) -> None:
        text = "used ghs_" + "a" * 36 + " and github_pat_" + "B" * 30
        redacted = redact_text(text)

        assert "ghs_" not in redacted
        assert "github_pat_" not in redacted
        assert redacted.count(REDACTED) == 2

    def test_authorization_header(self) -> None:
        assert redact_text("Authorization: secret-value") == f"Authorization: {REDACTED}"

    def test_plain_text_is_unchanged(self) -> None:
        assert redact_text("Label size/large added") == "Label size/large added"
        assert redact_text("") == ""


class TestRedactMapping:
    def test_sensitive_keys_are_blanked(self) -> None:
        redacted = redact_mapping({"github_token": "x", "Authorization": "y", "label": "size/small"})

        assert redacted == {"github_token": REDACTED, "Authorization": REDACTED, "label": "size/small"}

    def test_nested_values_are_scrubbed(self) -> None:
        redacted = redact_mapping({"request": {"headers": ["Bearer abc"]}, "count": 3})

        assert redacted == {"request": {"headers": [f"Bearer {REDACTED}"]}, "count": 3}

    def test_processor_applies_to_event(self) -> None:
        event = {"event": "GitHub API error", "error": "Bearer abc", "password": "hunter2"}

        assert redaction_processor(None, "info", event) == {
            "event": "GitHub API error",
            "error": f"Bearer {REDACTED}",
            "password": REDACTED,
        }
