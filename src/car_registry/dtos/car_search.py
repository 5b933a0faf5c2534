from pydantic import BaseModel, ConfigDict, Field

from car_registry.domain.criteria import DEFAULT_SORT_DIRECTION, DEFAULT_SORT_FIELD

MIN_MODEL_YEAR = 1950
MAX_MODEL_YEAR = 2030


class CarSearchRequestDTO(BaseModel):
    """Search request as received from a caller, before conversion to criteria."""

    search_term: str | None = Field(
        default=None,
        description="Substring matched against brand, model or color (case-insensitive)",
        examples=["toyota"],
        max_length=100,
    )
    brand: str | None = Field(
        default=None,
        description="Filter by brand (case-insensitive exact match)",
        examples=["Toyota"],
        max_length=30,
    )
    model: str | None = Field(
        default=None,
        description="Filter by model (case-insensitive exact match)",
        examples=["Corolla"],
        max_length=50,
    )
    year: int | None = Field(
        default=None,
        description="Exact model year",
        examples=[2020],
        ge=MIN_MODEL_YEAR,
        le=MAX_MODEL_YEAR,
    )
    min_year: int | None = Field(
        default=None,
        description="Minimum model year (inclusive)",
        examples=[2015],
        ge=MIN_MODEL_YEAR,
        le=MAX_MODEL_YEAR,
    )
    max_year: int | None = Field(
        default=None,
        description="Maximum model year (inclusive)",
        examples=[2022],
        ge=MIN_MODEL_YEAR,
        le=MAX_MODEL_YEAR,
    )
    color: str | None = Field(
        default=None,
        description="Filter by color (case-insensitive exact match)",
        examples=["Blanco"],
        max_length=20,
    )
    plate_number: str | None = Field(
        default=None,
        description="Filter by plate number (case-insensitive exact match)",
        examples=["ABC123"],
        max_length=10,
    )
    is_vintage: bool | None = Field(
        default=None,
        description="Only cars 25 or more years old (true) or younger (false)",
    )
    is_new: bool | None = Field(
        default=None,
        description="Only cars 3 or fewer years old (true) or older (false)",
    )
    has_photo: bool | None = Field(
        default=None,
        description="Only cars with (true) or without (false) a photo",
    )
    sort_by: str | None = Field(
        default=DEFAULT_SORT_FIELD,
        description="Sort field",
        examples=["year"],
        pattern=r"^(brand|model|year|color|createdAt|updatedAt)$",
    )
    sort_direction: str | None = Field(
        default=DEFAULT_SORT_DIRECTION,
        description="Sort direction, asc or desc in any case",
        examples=["desc"],
        pattern=r"^(?i:asc|desc)$",
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "search_term": None,
                "brand": "Toyota",
                "min_year": 2015,
                "max_year": 2022,
                "has_photo": True,
                "sort_by": "year",
                "sort_direction": "desc",
            }
        }
    )
