# vikingcase

Turn identifiers such as `YesNo` or `ToggleCase` into any common naming
style, and give `Enum` members a readable `str()` built from their names.
The package has no dependencies beyond the standard library.

## Installation

```
pip install vikingcase
```

## Case styles

Every style is a member of `vikingcase.casing.CaseType`. Its value is its
name, and `CaseType.parse(name)` looks a style up by that exact name:

| word style | `_`            | `-`          | no separator    | space         |
| ---------- | -------------- | ------------ | --------------- | ------------- |
| lowercase  | Snake          | Kebab        | Flat            | Lower         |
| UPPERCASE  | Constant       | Cobol        | UpperFlat       | Upper         |
| Capital    | Ada            | Train        | Pascal          | Title         |
| camel      |                |              | Camel           |               |

`UpperSnake` and `UpperKebab` give the same result as `Constant` and
`Cobol`, and `UpperCamel` the same as `Pascal`. `Sentence` capitalises the
first word only, `Toggle` lower-cases the first letter of each word and
upper-cases the rest, and `Alternating` switches letter case from one
letter to the next. `None` leaves the text exactly as it is.

An unknown name raises `CaseTypeError`, a subclass of `ValueError`.

```python
from vikingcase.casing import CaseType, to_case

to_case("YesNo", CaseType.COBOL)                 # 'YES-NO'
to_case("SentenceCase", "Sentence")              # 'Sentence case'
CaseType.parse("Cobol").convert("TrainCase")     # 'TRAIN-CASE'
```

`to_case` takes either a `CaseType` or its name. Before a name is re-joined
it is broken into words by `split_words`: at underscores, hyphens and
spaces, between a lower-case and an upper-case letter, before the last
capital of an acronym that starts a new word, and between letters and
digits.

`CaseType.from_attributes(names)` returns the last entry that denotes a
style, or `None` when there is none. Entries may be `CaseType` members or
strings such as `"Snake"` or `"Sentence()"`; anything else is skipped.

## Display names for enums

`vikingcase.display.enum_display` is a class decorator. Its first argument
is the style for every member; keyword arguments name single members whose
style differs. Styles may be given as `CaseType` members or by name.
Members with no style at all keep their names unchanged. Both `str()` and
`format()` of a member give its display name.

```python
from enum import Enum

from vikingcase.display import enum_display


@enum_display("Flat", Vertical="UpperFlat", ToTALLyRandDOmCaSe="None")
class Orientation(Enum):
    Horizontal = 1
    Vertical = 2
    ToTALLyRandDOmCaSe = 3


str(Orientation.Horizontal)          # 'horizontal'
str(Orientation.Vertical)            # 'VERTICAL'
str(Orientation.ToTALLyRandDOmCaSe)  # 'ToTALLyRandDOmCaSe'
```

Decorating a class that is not an `Enum` raises `TypeError`; a keyword
argument that names no member raises `ValueError`.

Note that `Lower` separates words with spaces; use `Flat` to get the name
simply lower-cased.

`display_name(name, case, override)` gives the same result for a single
name: the override style wins, then the overall style, and with neither
the name is returned as it is.

## Command line

```
vikingcase
```

prints a short demonstration: an enum styled `Cobol` as a whole, with one
member shown in `Upper` style (`YES NO`) and another in `Ada` style
(`No_Yes`). The command takes no options besides `--help`.