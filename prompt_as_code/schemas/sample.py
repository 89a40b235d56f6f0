from typing import Any, ClassVar
from pydantic import BaseModel, ConfigDict, Field, field_validator


class Assertions(BaseModel):
    """Expected-content checks for one test case."""
    model_config = ConfigDict(frozen=True)

    should_contain: list[str] = Field(default_factory=list, description="Strings the response must contain")
    should_not_contain: list[str] = Field(default_factory=list, description="Strings the response must not contain")

    @field_validator("should_contain", "should_not_contain", mode="before")
    @classmethod
    def _none_as_empty(cls, value: Any) -> Any:
        return [] if value is None else value


class TestCase(BaseModel):
    """One concrete input binding plus its assertions."""
    __test__: ClassVar[bool] = False
    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Case name, unique within its collection by convention only")
    input: dict[str, Any] = Field(default_factory=dict, description="Template variables")
    assertions: Assertions = Field(default_factory=Assertions)

    @field_validator("input", "assertions", mode="before")
    @classmethod
    def _null_as_empty(cls, value: Any) -> Any:
        return {} if value is None else value


class SampleCollection(BaseModel):
    """Named group of test cases exercising one prompt definition."""
    model_config = ConfigDict(frozen=True)

    prompt_name: str | None = Field(None, description="Prompt to match; derived from the file name when absent")
    test_cases: list[TestCase] = Field(default_factory=list)

    @classmethod
    def from_source(cls, data: Any) -> "SampleCollection":
        """Accept either a bare list of test cases or a collection object."""
        if isinstance(data, list):
            return cls(test_cases=data)
        return cls.model_validate(data)
