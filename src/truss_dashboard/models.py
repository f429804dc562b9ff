"""Vendor API payload models.

Field names follow the vendor's camelCase JSON; unknown fields are ignored.
"""

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field

from truss_dashboard.geometry import GeometryPoint, member_length


class VendorModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class Project(VendorModel):
    id: str = ""
    name: str = ""
    description: str | None = None
    component_design_guids: list[str] = Field(default_factory=list, alias="componentDesignGuids")


class Lumber(VendorModel):
    species: str = ""
    grade: str = ""
    nominal_thickness: str = Field("", alias="nominalThickness")
    nominal_width: str = Field("", alias="nominalWidth")
    actual_thickness: float = Field(0.0, alias="actualThickness")
    actual_width: float = Field(0.0, alias="actualWidth")
    structure: str = ""
    treatment_type: str = Field("", alias="treatmentType")


class Member(VendorModel):
    lumber: Lumber | None = None
    overall_length: float | None = Field(None, alias="overallLength")
    geometry: list[GeometryPoint] = Field(default_factory=list)

    @property
    def length(self) -> float:
        """Declared overall length, or the span of the geometry when absent."""
        if self.overall_length is not None:
            return self.overall_length
        return member_length(self.geometry)


class PlatePair(VendorModel):
    plate_type: str = Field("", alias="plateType")
    width: float = 0.0
    length: float = 0.0


class Component(VendorModel):
    name: str | None = None
    members: list[Member] = Field(default_factory=list)
    plate_pairs: list[PlatePair] = Field(default_factory=list, alias="platePairs")
    number_of_plies: int = Field(0, alias="numberOfPlies")


class ComponentDesign(VendorModel):
    component: Component | None = None


class ComponentDesignResponse(VendorModel):
    component_design: ComponentDesign | None = Field(None, alias="componentDesign")


class LumberPriceRequest(VendorModel):
    actual_thickness: str = Field("", alias="actualThickness")
    actual_width: str = Field("", alias="actualWidth")
    grade: str = ""
    species: str = ""
    structure: str = ""
    treatment_type: str = Field("", alias="treatmentType")
    nominal_width: str = Field("", alias="NominalWidth")
    nominal_thickness: str = Field("", alias="NominalThickness")

    @classmethod
    def for_lumber(cls, lumber: Lumber) -> "LumberPriceRequest":
        return cls(
            actual_thickness=str(lumber.actual_thickness),
            actual_width=str(lumber.actual_width),
            grade=lumber.grade,
            species=lumber.species,
            structure=lumber.structure,
            treatment_type=lumber.treatment_type,
            nominal_width=lumber.nominal_width,
            nominal_thickness=lumber.nominal_thickness,
        )


class LumberPrice(VendorModel):
    length: float = 0.0
    cost: Decimal = Decimal("0")
