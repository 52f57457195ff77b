from pathlib import Path

from streamlit.testing.v1 import AppTest

APP_PATH = Path(__file__).resolve().parents[1] / "promptdirector" / "app.py"


def test_streamlit_app_loads() -> None:
    """
    Test that the Streamlit app loads on the script step without errors.
    """
    at = AppTest.from_file(str(APP_PATH))
    at.run(timeout=30)
    assert not at.exception
    assert at.session_state["step"] == 0
    assert any("Step 1" in sub.value for sub in at.subheader)


def test_streamlit_wizard_advances_to_template_step() -> None:
    """
    Test that entering a script and pressing the button shows the template step.
    """
    at = AppTest.from_file(str(APP_PATH))
    at.run(timeout=30)
    at.text_area[0].input("Once upon a time.").run(timeout=30)
    at.button[0].click().run(timeout=30)
    assert not at.exception
    assert at.session_state["script"] == "Once upon a time."
    assert at.session_state["step"] == 1
