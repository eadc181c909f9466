"""
Registros entregues ao estágio de emissão (fora do core).
"""
from .plan import (
    ANNOTATION_CONSTANT,
    SIDECAR_CONSTANT,
    EmissionRecord,
    plan_annotation_records,
    plan_emission,
    plan_sidecar_records,
)

__all__ = [
    "ANNOTATION_CONSTANT",
    "SIDECAR_CONSTANT",
    "EmissionRecord",
    "plan_annotation_records",
    "plan_emission",
    "plan_sidecar_records",
]
