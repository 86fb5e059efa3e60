from __future__ import annotations

from dataclasses import dataclass, field

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

DEFAULT_BUDGET = 60000


# ── Catalog / extraction records ─────────────────────────────────────────


@dataclass(frozen=True)
class CatalogRow:
    sku: str
    system_code: str
    name: str
    description: str
    price: int
    quantity: int
    url: str


@dataclass(frozen=True)
class DeviceFeatures:
    device: str = "any"
    has_camera: bool = False
    has_keypad: bool = False
    screen_inches: float | None = None


@dataclass(frozen=True)
class AttributeBundle:
    memory_gb: int | None = None
    storage_gb: int | None = None
    has_gpu: bool = False
    hdd_only: bool = False
    cpu: str | None = None
    cpu_generation: int | None = None
    features: DeviceFeatures = field(default_factory=DeviceFeatures)


@dataclass(frozen=True)
class Preferences:
    device: str = "any"
    needs_camera: bool = False
    needs_keypad: bool = False
    screen: str | None = None


@dataclass(frozen=True)
class ScoredCandidate:
    row: CatalogRow
    attributes: AttributeBundle
    features: DeviceFeatures
    score: float


# ── API models ───────────────────────────────────────────────────────────


class RecommendationRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    use_case: str = Field(default="office", alias="useCase")
    budget_max: int = Field(
        default=DEFAULT_BUDGET,
        ge=0,
        validation_alias=AliasChoices("budgetMax", "budget", "budget_max"),
        description="Buyer's budget ceiling in yen",
    )
    device: str = Field(default="any", description='"any", "laptop" or "desktop"')
    needs_camera: bool = Field(default=False, alias="needsCamera")
    needs_keypad: bool = Field(default=False, alias="needsKeypad")
    screen: str | None = Field(default=None, description='"13-14" or "15+"')

    @field_validator("use_case", mode="before")
    @classmethod
    def _default_use_case(cls, value):
        return "office" if value is None else value

    @field_validator("budget_max", mode="before")
    @classmethod
    def _default_budget(cls, value):
        return DEFAULT_BUDGET if value is None else value


class SpecsOut(BaseModel):
    memory_gb: int | None = None
    storage_gb: int | None = None
    gpu: bool = False
    cpu: str | None = None
    device: str = "any"
    camera: bool = False
    keypad: bool = False
    screen_inches: float | None = None


class RecommendationOut(BaseModel):
    tier: str
    sku: str
    name: str
    price: int
    url: str
    image_url: str = ""
    specs: SpecsOut
    score: float
    reason: str


class TargetsOut(BaseModel):
    target: int
    enough: int
    comfortable: int
    headroom: int


class RecommendationMeta(BaseModel):
    use_case: str
    use_case_label: str
    budget_max: int
    targets: TargetsOut
    note: str


class RecommendationResponse(BaseModel):
    ok: bool = True
    meta: RecommendationMeta
    products: list[RecommendationOut]
