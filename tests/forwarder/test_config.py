"""Tests for forwarder configuration loading."""

from src.forwarder import ForwarderConfig, ForwardRule


class TestForwardRule:
    """Test rule value parsing."""

    def test_parse_trims_both_parts(self):
        rule = ForwardRule.parse("  alice@old.com ;  alice@new.com ")

        assert rule == ForwardRule("alice@old.com", "alice@new.com")

    def test_parse_without_delimiter_has_empty_target(self):
        assert ForwardRule.parse("alice@old.com") == ForwardRule("alice@old.com", "")


class TestForwarderConfig:
    """Test building configuration from an environment mapping."""

    def test_from_env_reads_settings_and_rules_in_order(self):
        environ = {
            "SENDER_ADDRESS": "relay@svc.com",
            "DEFAULT_RECIPIENT": "catchall@new.com",
            "FORWARD_RULE_B": "bob@old.com;bob@new.com",
            "PATH": "/usr/bin",
            "FORWARD_RULE_A": "alice@old.com;alice@new.com",
        }

        config = ForwarderConfig.from_env(environ)

        assert config.sender_address == "relay@svc.com"
        assert config.default_recipient == "catchall@new.com"
        assert config.rules == [
            ForwardRule("bob@old.com", "bob@new.com"),
            ForwardRule("alice@old.com", "alice@new.com"),
        ]
        assert config.email_bucket is None
        assert config.email_key_prefix == ""

    def test_missing_required_settings_default_to_empty(self, caplog):
        config = ForwarderConfig.from_env({})

        assert config.sender_address == ""
        assert config.default_recipient == ""
        assert config.rules == []
        assert "SENDER_ADDRESS is not set" in caplog.text

    def test_ses_bucket_settings(self):
        config = ForwarderConfig.from_env(
            {"EMAIL_BUCKET": "inbound-mail", "EMAIL_KEY_PREFIX": "incoming/"}
        )

        assert config.email_bucket == "inbound-mail"
        assert config.email_key_prefix == "incoming/"

    def test_reads_process_environment_by_default(self, forwarder_env):
        config = ForwarderConfig.from_env()

        assert config.sender_address == "relay@svc.com"
        assert config.rules == [ForwardRule("alice@old.com", "alice@new.com")]
