from .details import extract_details
from .estimate import extract_estimate
from .extract import extract
from .fallback import build_fallback_result
from .labels import extract_labels, generate_labels
from .reconcile import reconcile

__all__ = [
    "extract",
    "extract_estimate",
    "extract_labels",
    "generate_labels",
    "extract_details",
    "reconcile",
    "build_fallback_result",
]
