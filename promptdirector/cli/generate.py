import sys
from pathlib import Path
from time import time

from dotenv import load_dotenv
from loguru import logger

from promptdirector.core.errors import PromptDirectorError
from promptdirector.core.session_controller import SessionController
from promptdirector.utils.env_cfg import load_gemini_env, load_path_env
from promptdirector.utils.logging_cfg import setup_logging


def read_text_file(path: str | Path) -> str:
    """
    Reads a script or template file as UTF-8 text.

    Args:
        path (str | Path): Path to the text file.

    Returns:
        str: The file content.

    Raises:
        FileNotFoundError: If the file does not exist.
    """
    if not isinstance(path, Path):
        path = Path(path.strip().strip('"')).expanduser()
    if not path.is_file():
        logger.error("FileNotFoundError: '{}' does not exist.", path)
        raise FileNotFoundError(f"File '{path}' does not exist.")
    return path.read_text(encoding="utf-8-sig")


def get_inputs() -> tuple[str, str, str]:
    """
    Prompts the user for the script file, the template file and the theme.

    Returns:
        tuple[str, str, str]: Theme, script and template text.
    """
    script = read_text_file(input("Script file: "))
    template = read_text_file(input("Prompt Visual Image template file: "))
    theme = input("Theme: ").strip()
    return theme, script, template


def _store_output(filename: str, text: str, output_path: str | Path) -> Path:
    """
    Stores a transcript as a text file.

    Args:
        filename (str): The name of the output file (without extension).
        text (str): The transcript text.
        output_path (str | Path): The directory to store the output file.

    Returns:
        Path: The written file.
    """
    if not isinstance(output_path, Path):
        output_path = Path(output_path).expanduser()

    if not output_path.exists():
        logger.info("Creating output directory at {}", output_path)
        output_path.mkdir(parents=True, exist_ok=True)

    target = output_path / f"{filename}.txt"
    target.write_text(text, encoding="utf-8")
    logger.info("Transcript stored in {}", target)
    return target


def run_session(
    controller: SessionController, theme: str, script: str, template: str
) -> None:
    """
    Runs the first generation, then keeps asking for further script files.

    An empty answer ends the session. Failed continuations are logged and the
    user is asked again.

    Args:
        controller (SessionController): The session controller.
        theme (str): The theme title.
        script (str): The initial script.
        template (str): The Prompt Visual Image template.
    """
    print(controller.start(theme, script, template))
    while True:
        answer = input("Next script file (leave empty to finish): ").strip()
        if not answer:
            break
        try:
            chunk = read_text_file(answer)
        except FileNotFoundError:
            continue
        try:
            print(controller.continue_generation(chunk))
        except PromptDirectorError as e:
            logger.warning("Continuation failed, try again: {}", e)


def main() -> None:
    """
    Main entry point for the CLI.
    """
    load_dotenv()
    setup_logging()
    controller = SessionController(config=load_gemini_env())
    try:
        theme, script, template = get_inputs()
        run_session(controller, theme, script, template)
    except (PromptDirectorError, FileNotFoundError) as e:
        logger.error("Generation aborted: {}", e)
        sys.exit(1)
    finally:
        if controller.has_session:
            _store_output(
                filename=f"{int(time())}_transcript",
                text=controller.transcript(),
                output_path=load_path_env().results,
            )


if __name__ == "__main__":
    main()
