# opinionated

A console survey system. People register with an e-mail address and a
password, log in, and view or update their account. Administrators manage
user accounts and build, modify, view and delete surveys made of questions
with preset or custom answers. Users and surveys are kept in small binary
files in a data directory.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Commands

Both commands take an optional data directory (the current directory by
default) and end with exit status 1 if input runs out.

### `opinionated [directory]`

Starts the main menu:

```
Main Menu
[1] Login
[2] Register
[3] Exit
>>
```

Registration checks the e-mail format (at least 7 and at most 99 bytes),
refuses addresses that are already taken, and asks for a password of the same
length limits with an upper-case letter, a lower-case letter and a digit.

After logging in, a user can list the surveys and view one, see their account
details, change their e-mail or password, or delete their account.
Administrators first choose between the admin menu and the user menu. The
admin menu manages users (view all, add, delete, modify e-mail, password,
admin status, survey and question counts, rank; an administrator cannot pick
their own account there) and surveys (view data, add, modify questions and
answers, delete).

The main menu also accepts maintenance keys: `a` lists all users, `d` empties
the user file, `s` lists the surveys, `f` empties the survey index, and `n`
adds a starter administrator and three ordinary accounts at example.com.

### `survey-engine [directory]`

Walks you through building a single survey, prints it, saves it under
`surveys/<id>.bin`, reads it back and prints the loaded copy.

## Files

| File               | Holds                                            |
|--------------------|--------------------------------------------------|
| `Users.bin`        | fixed-size user records, sorted by e-mail        |
| `SurveyIDs.bin`    | a count followed by the sorted list of survey ids|
| `surveys/<id>.bin` | one survey with its questions and answers        |

New surveys take the lowest id freed by a deleted survey, or the next one
after the last.

## Library use

```python
from opinionated.question import Answer, Question
from opinionated.survey import Survey

question = Question(text="Favourite colour?")
question.add_answer(Answer(text="Red"))
question.add_answer(Answer(text="Blue"))

survey = Survey(id=1, name="Colours", about="A short poll")
survey.add_question(question)

with open("colours.bin", "wb") as stream:
    survey.write(stream)
with open("colours.bin", "rb") as stream:
    loaded = Survey.read(stream)
print(loaded.name, len(loaded.questions))
```

Other pieces:

- `opinionated.user.User` — an account, with `pack()` / `User.unpack()` for
  its fixed-size record.
- `opinionated.userstore.UserStore` — the sorted user file: `add`, `find`,
  `get`, `set`, `delete`, `all`, `verify`, `count`, `reset`.
- `opinionated.userstore.is_valid_email` and `password_problems` — the checks
  the registration screens use; `password_problems("password")` returns
  `[4, 6]` (no upper-case letter, no digit).
- `opinionated.survey.SurveyIndex` — the survey id file: `ids`, `allocate`,
  `remove_at`, `contains`.
- `opinionated.database.Database` — opens and closes `Users.bin` or
  `Questions.bin` in a directory, raising `DatabaseError` on failure.
- `opinionated.view` — the menu texts (`prompt`, `error`) and `UserView`
  for displaying users and surveys.
- `opinionated.console.Console` — the token-based input reader the menus use.

## What it does not do

"Take Survey" lists the surveys and shows the chosen one, but users cannot
answer it: no responses are recorded, so the answer counts and the
percentages shown by "View Survey Data" only change if the stored files are
edited by other means. The survey and question counts on an account are only
changed by an administrator.