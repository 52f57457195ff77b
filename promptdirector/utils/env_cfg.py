import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()


@dataclass(frozen=True)
class GeminiConfig:
    """
    Dataclass for Gemini API configuration.
    """

    api_key: str
    model: str
    temperature: float
    request_timeout: int


@dataclass(frozen=True)
class LogConfig:
    """
    Dataclass for logging configuration.
    """

    path: Path
    level: str


@dataclass(frozen=True)
class PathConfig:
    """
    Dataclass for path configuration.
    """

    results: Path


@dataclass(frozen=True)
class UIConfig:
    """
    Dataclass for UI configuration.
    """

    accepted_exts: tuple[str, ...]


def resolve_api_key() -> str:
    """
    Resolve the Gemini credential from the environment.

    ``GEMINI_API_KEY`` wins over ``GOOGLE_API_KEY``, which wins over the bare
    ``API_KEY`` variable.

    Returns:
        str: The stripped credential, or an empty string if none is set.
    """
    for name in ("GEMINI_API_KEY", "GOOGLE_API_KEY", "API_KEY"):
        value = os.getenv(name, "").strip()
        if value:
            return value
    return ""


def load_gemini_env() -> GeminiConfig:
    """
    Loads Gemini configuration from environment variables or defaults.

    Returns:
        GeminiConfig: Dataclass containing Gemini configuration.
        - api_key (str): The API credential (may be empty).
        - model (str): The chat model identifier.
        - temperature (float): The sampling temperature.
        - request_timeout (int): The per-request timeout in seconds.
    """
    return GeminiConfig(
        api_key=resolve_api_key(),
        model=os.getenv("GEMINI_MODEL", "gemini-2.5-flash"),
        temperature=float(os.getenv("GEMINI_TEMPERATURE", "0.7")),
        request_timeout=int(os.getenv("GEMINI_REQUEST_TIMEOUT", "120")),
    )


def load_log_env() -> LogConfig:
    """
    Loads logging configuration from environment variables or defaults.

    Returns:
        LogConfig: Dataclass containing logging configuration.
        - path (Path): Path to the log file.
        - level (str): Minimum level for the console sink.
    """
    project_root: Path = Path(__file__).parents[2].resolve()
    return LogConfig(
        path=Path(
            os.getenv("LOG_PATH", project_root / ".logs" / "promptdirector.log")
        ).expanduser(),
        level=os.getenv("LOG_LEVEL", "INFO").strip().upper() or "INFO",
    )


def load_path_env() -> PathConfig:
    """
    Loads path configuration from environment variables or defaults.

    Returns:
        PathConfig: Dataclass containing path configuration.
        - results (Path): Directory where exported transcripts are written.
    """
    data_dir: Path = Path.home() / "promptdirector"
    return PathConfig(
        results=Path(os.getenv("RESULTS_PATH", data_dir / "results")).expanduser(),
    )


def load_ui_env() -> UIConfig:
    """
    Loads UI configuration from environment variables or defaults.

    Returns:
        UIConfig: Dataclass containing UI configuration.
        - accepted_exts (tuple[str, ...]): File extensions accepted for text import.
    """
    raw = os.getenv("UPLOAD_EXTS", "txt,md,csv")
    exts = tuple(
        ext.strip().lstrip(".").lower() for ext in raw.split(",") if ext.strip()
    )
    return UIConfig(accepted_exts=exts or ("txt",))
