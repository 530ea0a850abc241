from pydantic import BaseModel, ConfigDict, Field
from semver import Version


class ProbeResult(BaseModel):
    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    repo: str = Field(..., description="Repository in owner/name form")
    current: Version = Field(..., description="Deployed version")
    latest: Version | None = Field(None, description="Latest stable upstream version, if any")

    @property
    def up_to_date(self) -> bool:
        # nothing to compare against counts as current
        if self.latest is None:
            return True

        return not self.latest > self.current

    @property
    def gauge_value(self) -> float:
        return 1.0 if self.up_to_date else 0.0
