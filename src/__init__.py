"""SES mail forwarder."""
