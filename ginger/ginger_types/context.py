"""Contains the models passed between the parser, walker and emitter"""

from typing import List

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from ginger.constants import constants


class SourceFile(BaseModel):
    """A compilable unit discovered during the tree walk"""
    model_config = ConfigDict(frozen=True)

    name: str
    """File name without its extension"""
    path: str
    """Directory holding the file, with a trailing separator"""
    extension: str
    """Extension including the leading dot"""

    @field_validator("extension")
    @classmethod
    def _check_extension(cls, value: str) -> str:
        if value not in constants.SOURCE_EXTENSIONS:
            raise ValueError(f"{value!r} is not a compilable extension")
        return value

    @property
    def input_path(self) -> str:
        """Path of the source as written in the compile edge"""
        return self.path + self.name + self.extension

    @property
    def object_path(self) -> str:
        """Object path relative to $builddir"""
        path = self.path[1:] if self.path.startswith(".") else self.path
        return path + self.name + constants.OBJECT_EXTENSION


class BuildContext(BaseModel):
    """Everything needed to emit one build.ninja document.

    Pipeline steps never mutate a context; they return an updated copy.
    """

    build_directory: str = constants.DEFAULT_BUILD_DIRECTORY
    """Value of $builddir, last -builddir wins"""
    compiler: str = ""
    """Value of $cc, empty when unset"""
    compiler_flags: List[str] = Field(default_factory=list)
    """Every -cf argument in order of appearance"""
    linker: str = ""
    """Value of $ll, empty when unset"""
    linker_flags: List[str] = Field(default_factory=list)
    """Every -lf argument in order of appearance"""
    source_files: List[SourceFile] = Field(default_factory=list)
    """Sources in traversal order"""
    include_paths: List[str] = Field(default_factory=list)
    """Header directories in discovery order"""
    target: str = ""
    """Name of the linked artifact"""

    @model_validator(mode="after")
    def _check_include_paths(self) -> "BuildContext":
        seen = set()
        for include_path in self.include_paths:
            folded = include_path.casefold()
            if folded in seen:
                raise ValueError(f"Duplicate include path: {include_path}")
            seen.add(folded)
        return self

    def evolve(self, **changes) -> "BuildContext":
        """Return a validated copy with ``changes`` applied"""
        return self.model_validate({**self.model_dump(), **changes})
