"""Static description of the comparison algorithm behind this service."""
from pydantic import BaseModel, ConfigDict, Field


class AlgorithmInfo(BaseModel):
    """Capability record reported by the info endpoint."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    algorithm_name: str = Field("AWS Rekognition", alias="AlgorithmName")
    algorithm_version: str = Field("1.0.0", alias="AlgorithmVersion")
    algorithm_type: str = Field("Face", alias="AlgorithmType")
    company_name: str = Field("Amazon", alias="CompanyName")
    technical_contact_email: str = Field("N/A", alias="TechnicalContactEmail")
    recommended_cpus: int = Field(4, alias="RecommendedCPUs")
    recommended_mem: int = Field(2048, alias="RecommendedMem", description="Memory in MB")


ALGORITHM_INFO = AlgorithmInfo()


def get_algorithm_info() -> AlgorithmInfo:
    """Return the capability record. Makes no external calls."""
    return ALGORITHM_INFO
