"""Static metadata describing Flag Quiz."""

APP_NAME = "Flag Quiz"
APP_VERSION = "0.1"
APP_LICENSE = "MIT License"
APP_ABOUT_TEXT = (
    "Flag Quiz shows a flag and a handful of country names. "
    "Pick the country the flag belongs to; wrong answers are greyed out until you find it."
)

HELP_TEXT = (
    "Each quiz draws a set of flags without repeats. For every flag, click the matching country.\n\n"
    "A wrong guess disables that choice and you can keep trying. After a correct guess the "
    "answer is shown for two seconds and the next flag loads.\n\n"
    "When the last flag is answered you get your total number of guesses and your accuracy. "
    "Use Settings to change the number of flags per quiz or the number of choices per flag."
)
