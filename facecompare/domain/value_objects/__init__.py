"""Value objects package."""
from .comparison import ComparisonOutcome
from .template import ImageTemplate, S3ObjectRef, StoredTemplate

__all__ = ["ComparisonOutcome", "ImageTemplate", "S3ObjectRef", "StoredTemplate"]
