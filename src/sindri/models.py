"""Pydantic models for the ``sindri init`` configuration context."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, field_validator, model_validator
from pydantic.alias_generators import to_camel

from . import validation

PROJECT_KIND_VALUES = ("circom", "gnark", "halo2", "noir")
ProjectKind = Literal["circom", "gnark", "halo2", "noir"]
PROJECT_KIND_CHOICES: tuple[tuple[str, str], ...] = (
    ("Circom", "circom"),
    ("Gnark", "gnark"),
    ("Halo2", "halo2"),
    ("Noir", "noir"),
)
DEFAULT_PROJECT_KIND: ProjectKind = "gnark"

PROVING_SCHEME_VALUES = ("groth16",)
ProvingScheme = Literal["groth16"]
PROVING_SCHEME_CHOICES: tuple[tuple[str, str], ...] = (("Groth16", "groth16"),)
DEFAULT_PROVING_SCHEME: ProvingScheme = "groth16"

CURVE_NAME_VALUES = ("bn254", "bls12-377", "bls12-381", "bls24-315", "bw6-633", "bw6-761")
CurveName = Literal["bn254", "bls12-377", "bls12-381", "bls24-315", "bw6-633", "bw6-761"]
CURVE_NAME_CHOICES: tuple[tuple[str, str], ...] = (
    ("BN254", "bn254"),
    ("BLS12-377", "bls12-377"),
    ("BLS12-381", "bls12-381"),
    ("BLS24-315", "bls24-315"),
    ("BW6-633", "bw6-633"),
    ("BW6-761", "bw6-761"),
)
DEFAULT_CURVE_NAME: CurveName = "bn254"


def gnark_curve_name(curve_name: str) -> str:
    """Return the gnark ``ecc`` identifier for a curve name.

    Example:
        >>> gnark_curve_name("bls12-377")
        'BLS12_377'
    """
    return curve_name.upper().replace("-", "_")


class ProjectContext(BaseModel):
    """Answers shared by every project kind.

    Field aliases are the camelCase placeholder names used by the templates.

    Attributes:
        circuit_name: Validated circuit name.
        circuit_type: Selected project kind.

    Example:
        >>> ProjectContext(circuitName="demo", circuitType="noir").template_context()
        {'circuitName': 'demo', 'circuitType': 'noir'}
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        alias_generator=to_camel,
        populate_by_name=True,
    )

    circuit_name: str
    circuit_type: ProjectKind

    @field_validator("circuit_name")
    @classmethod
    def check_circuit_name(cls, value: str) -> str:
        verdict = validation.validate_circuit_name(value)
        if verdict is not True:
            raise ValueError(verdict)
        return value

    def template_context(self) -> dict[str, str]:
        """Return a plain-dict copy keyed by template placeholder names."""
        return self.model_dump(by_alias=True)


class GnarkProjectContext(ProjectContext):
    """Answers for a gnark circuit project.

    Attributes:
        package_name: Go package name.
        proving_scheme: Proving scheme (groth16).
        curve_name: Curve family.
        gnark_curve_name: ``curve_name`` as a gnark ``ecc`` identifier.
    """

    circuit_type: Literal["gnark"] = "gnark"
    package_name: str
    proving_scheme: ProvingScheme
    curve_name: CurveName
    gnark_curve_name: str

    @field_validator("package_name")
    @classmethod
    def check_package_name(cls, value: str) -> str:
        verdict = validation.validate_package_name(value)
        if verdict is not True:
            raise ValueError(verdict)
        return value

    @model_validator(mode="after")
    def check_gnark_curve_name(self) -> GnarkProjectContext:
        expected = gnark_curve_name(self.curve_name)
        if self.gnark_curve_name != expected:
            raise ValueError(f"gnarkCurveName must be {expected!r} for curve {self.curve_name!r}")
        return self
