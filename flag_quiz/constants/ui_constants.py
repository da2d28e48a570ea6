"""Qt UI constants used across widgets."""

WINDOW_TITLE: str = "Flag Quiz"
DEFAULT_FONT_SIZE: int = 14
FLAG_IMAGE_MAX_WIDTH: int = 480
FLAG_IMAGE_MAX_HEIGHT: int = 320
CHOICE_GRID_COLUMNS: int = 2

QUESTION_NUMBER_TEMPLATE: str = "Question {number} of {total}"
INCORRECT_ANSWER_MESSAGE: str = "Incorrect Guess!"

TOOLBAR_NEW_QUIZ: str = "New Quiz"
TOOLBAR_SETTINGS: str = "Settings"
TOOLBAR_HELP: str = "Help"
TOOLBAR_ABOUT: str = "About Flag Quiz"

RESULTS_DIALOG_TITLE: str = "Quiz complete"
RESET_QUIZ_BUTTON: str = "Reset Quiz"
LOAD_ERROR_TITLE: str = "Could not load countries"
CONFIG_ERROR_TITLE: str = "Quiz cannot start"
