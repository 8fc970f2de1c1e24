"""Starter .smartcommit.toml template."""

DEFAULT_TOML = """\
# smartcommit configuration
version = "1.0"

[message]
max_length = 50                 # subject-line character budget
include_breaking_change = true  # add '!' when the diff looks breaking
include_scope = true

[prompt]
max_diff_chars = 8000           # diff is cut here before it reaches the model
variations = 3                  # used by `smartcommit generate --count`

[generator]
# Command that reads the prompt on stdin and prints the message on stdout.
# command = ["llm", "-m", "gpt-4o-mini"]
timeout = 120

[rules]
# disable = ["MODIFY_API"]
# custom_dir = ".smartcommit-rules"

[output]
format = "terminal"             # terminal | json

[logging]
level = "warning"               # debug | info | warning | error
json = false                    # log as JSON lines on stderr
"""
