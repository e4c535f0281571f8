from rating_refresh.mimic.auth.signatures import SignatureGenerator, login_message, payload_digest

__all__ = ["SignatureGenerator", "login_message", "payload_digest"]
