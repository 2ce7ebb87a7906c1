from __future__ import annotations
import secrets

def _tok(nbytes: int = 12) -> str:
    return secrets.token_urlsafe(nbytes)

def new_artifact_id() -> str:
    return f"art_{_tok()}"
