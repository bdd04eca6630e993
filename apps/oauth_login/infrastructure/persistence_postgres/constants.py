"""PostgreSQL constants."""

AUTH_SCHEMA = "auth"
OAUTH_STATE_REFERENCES_TABLE = "oauth_state_references"
