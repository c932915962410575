from pydantic import BaseModel, Field
import os


def _env(name: str, default: str):
    # read at instantiation so values loaded by load_dotenv() are honoured
    return Field(default_factory=lambda: os.getenv(name, default))


class Settings(BaseModel):
    # env values arrive as strings; coerce them like explicit arguments
    model_config = {"validate_default": True}

    # Acceptance gate: uploads must end with this suffix
    file_extension: str = _env("DMNEX_FILE_EXTENSION", ".dmn")

    # Shape of the decoded tree: attributes are prefixed, text lives under text_key
    attribute_prefix: str = _env("DMNEX_ATTRIBUTE_PREFIX", "_")
    text_key: str = _env("DMNEX_TEXT_KEY", "_text")

    json_indent: int = _env("DMNEX_JSON_INDENT", "2")
    log_level: str = _env("DMNEX_LOG_LEVEL", "INFO")

    # Server only; the CLI reads whatever file it is given.
    max_upload_bytes: int = _env("DMNEX_MAX_UPLOAD_BYTES", str(5 * 1024 * 1024))
