"""
Shared Pydantic base model for doc-gist records.

Every record that crosses a component boundary (documents, requests,
credentials, dialog forms) derives from StrictModel.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class StrictModel(BaseModel):
    """Frozen, strictly validated record."""

    model_config = ConfigDict(
        extra='forbid',
        strict=True,
        frozen=True,
        # Validation errors must never echo document text or passwords back
        hide_input_in_errors=True,
    )
