"""Node model for the virtual filesystem tree."""

from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

ROOT_NAME = "/"


class File(BaseModel):
    """A leaf node holding plain multi-line text."""

    model_config = ConfigDict(frozen=True)

    type: Literal["file"] = "file"
    name: str
    content: str = ""


class Directory(BaseModel):
    """A container node. Children are kept in declaration order."""

    model_config = ConfigDict(frozen=True)

    type: Literal["directory"] = "directory"
    name: str
    children: tuple["Node", ...] = ()

    @field_validator("children")
    @classmethod
    def _check_child_names(cls, children: tuple["Node", ...]) -> tuple["Node", ...]:
        seen: set[str] = set()
        for child in children:
            if not child.name or "/" in child.name:
                raise ValueError(f"Invalid node name: {child.name!r}")
            if child.name in seen:
                raise ValueError(f"Duplicate child name: {child.name!r}")
            seen.add(child.name)
        return children

    def get_child(self, name: str) -> "Node | None":
        """Returns the direct child with the exact given name, if any."""
        for child in self.children:
            if child.name == name:
                return child
        return None


Node = Annotated[Union[Directory, File], Field(discriminator="type")]

Directory.model_rebuild()


class RootDirectory(Directory):
    """The top of the tree. Its name is always the root marker."""

    name: str = ROOT_NAME

    @model_validator(mode="after")
    def _check_root_name(self) -> "RootDirectory":
        if self.name != ROOT_NAME:
            raise ValueError(f"Root directory must be named {ROOT_NAME!r}")
        return self
