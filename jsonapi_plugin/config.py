"""Plugin configuration."""

from pydantic import BaseModel, ConfigDict, field_validator

from jsonapi_plugin.routing.planner import DEFAULT_NAMESPACE


class JSONAPISettings(BaseModel):
    """Options accepted by :class:`jsonapi_plugin.plugin.JSONAPI`.

    ``namespace`` prefixes every resource path. An empty string drops the
    prefix (``/posts`` instead of ``/api/posts``). ``debug`` adds the text of
    unhandled exceptions to the 500 error document.
    """

    model_config = ConfigDict(frozen=True)

    namespace: str = DEFAULT_NAMESPACE
    debug: bool = False

    @field_validator("namespace", mode="before")
    @classmethod
    def strip_slashes(cls, value: object) -> str:
        if value is None:
            return ""
        return str(value).strip().strip("/")
