"""Base class for immutable component view models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class ViewModel(BaseModel):
    """Finished, read-only aggregate of bound and derived fields.

    Bound state may carry keys a model does not expose (raw inputs of derived
    fields, build context); they are dropped on construction.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")
