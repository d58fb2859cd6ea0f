# aklib

A library of runtime building blocks with precise fixed-width semantics. It is
pure Python and has no dependencies outside the standard library.

## Modules

- `aklib.bits`: `popcount`, `count_trailing_zeroes`, `count_trailing_zeroes_safe`,
  `count_leading_zeroes`, `count_leading_zeroes_safe` and `bit_scan_forward` work on
  integers of width 8, 16, 32 or 64. The module also has integer `exp2`, `log2` and
  `ipow`, the 32-bit hash mixers `int_hash`, `double_hash`, `pair_int_hash`,
  `u64_hash` and `ptr_hash`, and `bit_cast`, which reinterprets bytes between two
  `struct` formats of equal size. The non-safe zero counts raise `ValueError` when
  given zero.
- `aklib.chartypes`: predicates that classify ASCII and Unicode code points
  (`is_ascii_digit`, `is_ascii_space`, `is_unicode_surrogate`,
  `is_unicode_noncharacter` and others). It also has `to_ascii_lowercase` and
  `to_ascii_uppercase`, and the digit functions `parse_ascii_digit`,
  `parse_ascii_hex_digit`, `parse_ascii_base36_digit` and `to_ascii_base36_digit`.
  These raise `ValueError` for input that is not a digit.
- `aklib.memory`: `memmem_optional(haystack, needle)` returns the offset of the first
  match or `None`. It uses a bitap search for needles under 32 bytes and KMP for
  longer ones. `memmem_chunks(chunks, needle)` searches across a sequence of byte
  chunks. The module also has `timing_safe_compare(a, b)` and `secure_zero(buffer)`.
- `aklib.errors`: `Error`, an exception built with `Error.from_errno`,
  `Error.from_syscall` or `Error.from_string_literal`. It has `is_errno()` and
  `is_syscall()`.
- `aklib.checked`: `Checked(value, bits=32, signed=True)`. This is an integer whose
  arithmetic wraps and sets a sticky overflow flag. Division by zero and `MIN // -1`
  also set the flag. Once the flag is set, `value()` raises `OverflowError`. The module
  also has `is_within_range`, `Checked.addition_would_overflow` and
  `Checked.multiplication_would_overflow`.
- `aklib.fixedpoint`: `FixedPoint(value, precision=..., bits=32)`, a signed binary
  fixed-point number. It offers `floor`, `ceil`, `round`, `trunk`, `fract` and their
  integer `l*` forms, as well as `log2`, `cast_to` and `create_raw`. Conversion to `int`
  and multiplication round half to even.
- `aklib.hashtable`: `HashTable` is an open-addressing set with double-hash probing.
  It grows at a 60% load factor and can optionally keep insertion order
  (`ordered=True`). It offers `set` (which returns a `HashSetResult`), `find`,
  `find_with_hash`, `contains`, `remove`, `remove_all_matching`, `ensure_capacity`,
  `clear` and `clear_with_capacity`.
- `aklib.hashmap`: `HashMap` is a key/value map built on `HashTable`. It offers `set`,
  `get`, `remove`, `contains`, `ensure`, `keys`, `values`, `items` and
  `remove_all_matching`, and supports item access. `Dictionary` is a map whose
  storage is shared between copies made with `copy.copy`.
- `aklib.bytebuffer`: `ByteBuffer` is a resizable byte sequence with a 32-byte inline
  capacity. It offers `create_zeroed`, `copy`, `resize`, `append`, `overwrite`, `slice`,
  `zero_fill`, `get_bytes_for_writing`, `clear` and `bytes`.
- `aklib.fileio`: `File.open_for_reading(path)` and `File.open_for_writing(path)`
  open a file in binary mode. The resulting object has `read`, `write`, `read_all`
  and `close`, and works as a context manager. OS failures are raised as
  `aklib.errors.Error` carrying the errno.
- `aklib.mathfuncs`: floating-point `sqrt`, `rsqrt`, `cbrt`, trigonometric,
  exponential, logarithmic and hyperbolic functions, `fmod`, `remainder` and `pow`.
  Domain errors give NaN and overflow gives infinity; nothing raises.
- `aklib.sequences`: `LinearArray` is a fixed-length sequence with `at`, `first`,
  `last`, `fill`, `min` and `max`. The module also has `iota_linear_array`, `find`,
  `find_if`, `find_index` and the `IterationDecision` enum.
- `aklib.atomic`: `Atomic` is a lock-guarded value cell, optionally a wrapping integer
  of a given width. It offers `load`, `store`, `exchange`, `compare_exchange_strong`
  (which returns `(succeeded, found_value)`) and the `fetch_*` operations. It accepts
  a `MemoryOrder` argument. Because it is lock-based, `is_lock_free()` is always
  `False`.
- `aklib.formatcheck`: `count_fmt_params` scans a `{}`-style format string.
  `check_format_parameter_consistency(fmt, param_count)` raises `FormatStringError`
  for unbalanced braces, references to missing arguments, or unused arguments.
  `CheckedFormatString` runs that check when given an argument count.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Examples

```python
from aklib.bits import popcount, count_leading_zeroes_safe
from aklib.checked import Checked
from aklib.fixedpoint import FixedPoint
from aklib.hashmap import HashMap
from aklib.memory import memmem_optional

popcount(0b1011, 8)                      # 3
count_leading_zeroes_safe(0, 32)         # 32

c = Checked(250, bits=8, signed=False)
c.add(10)
c.has_overflow()                         # True

int(FixedPoint(2.5, precision=8))        # 2 (ties go to even)

m = HashMap()
m.set("answer", 42)
m.get("answer")                          # 42
m.contains("question")                   # False

memmem_optional(b"hello world", b"world")  # 6
```

```python
from aklib.formatcheck import check_format_parameter_consistency, FormatStringError

check_format_parameter_consistency("{} and {}", 2)   # True
try:
    check_format_parameter_consistency("{} and {", 1)
except FormatStringError as exc:
    print(exc)   # Extra unclosed braces in format string
```

## What it does not do

This package is a library only. It has no command-line tool.

- `File` handles raw bytes only. It does not decode text, seek or lock files.
- `Atomic` gives atomicity by locking. The memory-order arguments are checked for
  validity, but they do not change behaviour.