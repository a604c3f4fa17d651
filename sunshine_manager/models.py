from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class AppEntry(BaseModel):
    """A launchable application registered with Sunshine."""

    # Sunshine keys we do not model (prep-cmd, output, ...) are kept as extras.
    model_config = ConfigDict(populate_by_name=True, extra="allow")

    name: str = Field(..., description="Display name shown in Moonlight")
    command: str = Field("", alias="cmd", description="Command Sunshine runs")
    image_path: str = Field(
        "", alias="image-path", description="Path to the box art image"
    )
    working_directory: str = Field(
        "", alias="working-directory", description="Working directory for the command"
    )
    detached: Union[bool, List[str]] = Field(
        True, description="Whether the command is detached from the stream session"
    )

    @classmethod
    def create(cls, name: str, command: str, image_path: str = "") -> "AppEntry":
        return cls(
            name=name,
            command=command,
            image_path=image_path,
            working_directory="",
            detached=True,
        )

    def to_json_dict(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_unset=True)


class ConfigDocument(BaseModel):
    """Root object of Sunshine's apps.json."""

    model_config = ConfigDict(extra="allow")

    apps: List[AppEntry] = Field(default_factory=list)

    def to_json_dict(self) -> Dict[str, Any]:
        data = self.model_dump(by_alias=True, exclude_unset=True)
        data["apps"] = [app.to_json_dict() for app in self.apps]
        return data


class RemoveGameRequest(BaseModel):
    game_name: Optional[str] = Field(None, alias="gameName")
