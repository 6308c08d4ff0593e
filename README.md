# memecli

Make ASCII art memes in your terminal.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Usage

List the built-in templates:

```
memecli --list-templates
```

Fill a template with your own top and bottom text:

```
memecli --template cat_feature --top-text "Ship it" --bottom-text "Friday 5pm"
```

Let it pick the template and the text at random:

```
memecli --random
```

Save the result to a file as well as printing it:

```
memecli -t deal_with_it -T "Tests pass" -B "First try" --export meme.txt
```

### Options

| Option | Meaning |
| --- | --- |
| `-t`, `--template TEMPLATE` | Template name; an unknown or missing name falls back to the first template |
| `-T`, `--top-text TEXT` | Top text (default: `Default Top Text`) |
| `-B`, `--bottom-text TEXT` | Bottom text (default: `Default Bottom Text`) |
| `-e`, `--export FILENAME` | Also write the meme, without colour, to a file (UTF-8) |
| `-r`, `--random` | Choose a random template and random top and bottom text from a small built-in list; `-t`, `-T` and `-B` are then ignored |
| `-l`, `--list-templates` | List all available templates and exit |
| `-V`, `--version` | Show the program version and exit |

The meme is printed in bold green using ANSI escape codes. After a successful
export the command prints `Meme saved to FILENAME`. If the file cannot be
written, an error is printed to standard error and the command exits with
status 1.

## Templates

The templates are built in. Among them are a set of bottle- and glass-shaped
drawings (`cider_bottle`, `cider_glass`, `cider_barrel`, `cider_drink`,
`brainrot`, `brainrot_drink`, `brainrot_skull`, `brainrot_bottle`) and several
text templates (`deal_with_it`, `cat_feature`, `hello_world`, `coding_life`,
`cute_cat`). Some names appear more than once in the list; `--template` picks
the first one with that name. Not every drawing has `{{TOP}}` or `{{BOTTOM}}`
markers, so for some templates the text does not appear in the output.

## Library use

```python
from memecli.templates import load_templates
from memecli.cli import generate_meme

template = next(t for t in load_templates() if t.name == "cat_feature")
print(generate_meme(template, "Hello", "World"))
```

- `memecli.templates.load_templates()` returns a new list of every built-in
  template, in a fixed order.
- `memecli.models.MemeTemplate` is a frozen dataclass holding a `name`, the
  `ascii_art` with `{{TOP}}` and `{{BOTTOM}}` markers, and a `placeholder`.
- `memecli.cli.generate_meme(template, top_text, bottom_text)` replaces every
  `{{TOP}}` and `{{BOTTOM}}` marker in the template's art and returns the text.
- `memecli.cli.main(argv=None)` runs the command line and returns the exit
  status.

## What it does not do

Templates cannot be loaded from files or added at run time; only the built-in
set is available. Memes are plain text: there is no image output.