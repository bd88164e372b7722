# learnkit

A small library of building blocks with no third-party dependencies:

- `learnkit.mathutils`: integer and float helpers. These are `add`, `multiply`,
  `divide`, `factorial`, `is_prime`, `find_max`, `average`, `power` and
  `number_to_words`, which spells 0 to 99 in English words.
- `learnkit.calculator`: a `Calculator` with a `memory` value, a
  `degrees_mode` flag and a history of up to 100 results.
- `learnkit.interfaces`: the abstract base classes `Database`, `FileSystem`,
  `NetworkClient` and `Logger`.
- `learnkit.file_processor`: a `FileProcessor` that works through an injected
  file system, network client and logger. It reads content, validates it,
  upper-cases it and writes the result.
- `learnkit.user_service`: a `User` dataclass and a `UserService` that stores
  users through an injected database and logger.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Math helpers

```python
from learnkit.mathutils import factorial, number_to_words, divide, power

factorial(5)          # 120
number_to_words(67)   # "sixty seven"
power(-2, 3)          # -8
divide(7.0, 0.0)      # raises ValueError("Division by zero")
```

Each of the following raises `ValueError`:

- a negative factorial
- a negative exponent to `power`
- an empty sequence given to `find_max` or `average`
- a number outside 0 to 99 given to `number_to_words`

## Calculator

```python
from learnkit.calculator import Calculator

calc = Calculator()
calc.add(2.0, 3.0)
calc.multiply(4.0, 5.0)
calc.history          # [5.0, 20.0]
calc.last_result      # 20.0

calc.memory = calc.last_result
calc.clear_memory()   # memory back to 0.0

calc.sin(90.0)        # 1.0, degrees mode is the default
calc.degrees_mode = False
calc.cos(0.0)         # 1.0

calc.reset()          # clears memory and history, restores degrees mode
```

Every result is recorded, including those of `power`, `sqrt`, `sin`, `cos`
and `subtract`. Once there are more than 100 results, the oldest one is
dropped.

`evaluate_expression` understands only these fixed strings: `"2+3"`, `"10-4"`,
`"6*7"` and `"15/3"`. An empty string raises `ValueError("Empty expression")`.
Any other string raises `ValueError("Unsupported expression format")`.

The calculator raises in these cases:

| Operation | Exception |
| --- | --- |
| `divide` by zero | `ValueError` |
| `sqrt` of a negative number | `ValueError` |
| `power` with a zero base and a negative exponent | `ValueError` |
| reading `last_result` before any calculation | `RuntimeError` |

## Services

Both services take their collaborators when they are constructed. Any object
that implements the interfaces in `learnkit.interfaces` will do.

```python
from learnkit.user_service import User, UserService

service = UserService(my_database, my_logger)
service.create_user(User("1", "Alice", "alice@example.com"))
service.get_user("1")   # User(id='1', name='Alice', email='alice@example.com')
service.all_user_ids()
```

Users are stored as `id|name|email`. The `create_user`, `update_user` and
`delete_user` methods return `True` or `False`. `get_user` returns `None`
when the user is missing or its data cannot be read. Each outcome is also
reported to the logger.

```python
from learnkit.file_processor import FileProcessor

processor = FileProcessor(my_file_system, my_network_client, my_logger)
processor.process_file("in.txt", "out.txt")   # writes "PROCESSED: " + upper-cased content
processor.download_and_process("http://localhost/data", "data.txt")
processor.backup_file("in.txt")               # copies to "in.txt.backup"
processor.process_multiple_files(["a.txt", "b.txt"])  # outputs "<name>.processed"
processor.total_processed_size                # bytes of input processed so far
```

`FileProcessor` rejects content in these cases:

- the content is empty
- the content is larger than 1,000,000 bytes
- a download's `response_code` is not 200

## What this package does not do

`learnkit.interfaces` only defines abstract classes. The package provides no
concrete implementation of any of them. That means:

- no real database
- no disk-backed file system
- no network client
- no logger

You supply your own implementations, or test doubles.

There is no command-line program.