"""OAuthStateReference Table.

타입 규칙 (Unbounded String 기본 전략):
    - TEXT: 기본 문자열 타입

created_at은 소비되지 않은 state를 운영 도구에서 정리할 때 사용합니다.
"""

from sqlalchemy import Column, DateTime, MetaData, Table, Text
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.sql import func

from apps.oauth_login.infrastructure.persistence_postgres.constants import (
    AUTH_SCHEMA,
    OAUTH_STATE_REFERENCES_TABLE,
)

metadata = MetaData(schema=AUTH_SCHEMA)

oauth_state_references_table = Table(
    OAUTH_STATE_REFERENCES_TABLE,
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column("referrer", Text, nullable=False),
    Column("created_at", DateTime(timezone=True), nullable=False, server_default=func.now()),
)
