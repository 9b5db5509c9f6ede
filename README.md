# seqwrap

TCP sequence numbers are 32 bits wide and wrap around, but a byte stream's
position can grow far beyond 2**32. `seqwrap` converts between the two
views. Everything lives in the module `seqwrap.wrapping_integers`.

## What it provides

- `WrappingInt32(raw_value)` is an immutable 32-bit value. The value given
  is reduced modulo 2**32 and is available as `raw_value`. Two instances
  compare equal when their raw values are equal.
  - `seqno + k` (with an `int` `k`) steps forward `k` positions, modulo 2**32.
  - `seqno - k` (with an `int` `k`) steps back `k` positions, modulo 2**32.
  - `a - b` (both `WrappingInt32`) gives the signed 32-bit distance from
    `b` to `a`, in the range -2**31 to 2**31 - 1.
  - `str(seqno)` is the decimal raw value.
- `wrap(n, isn)` turns a zero-based 64-bit absolute sequence number `n`
  into a `WrappingInt32` relative to the initial sequence number `isn`.
- `unwrap(n, isn, checkpoint)` turns a `WrappingInt32` back into an
  absolute sequence number that wraps to `n`, choosing the one nearest
  `checkpoint`, a recently seen absolute sequence number. The result is
  kept within 64 bits.

`wrap` raises `ValueError` if `n` is not an unsigned 64-bit integer, and
`unwrap` raises `ValueError` if `checkpoint` is not one.

Each direction of a TCP connection has its own ISN; use the ISN of the
stream the numbers belong to.

## Installation

```
pip install .
```

## Example

```python
from seqwrap.wrapping_integers import WrappingInt32, wrap, unwrap

isn = WrappingInt32(15)

seqno = wrap(3 * 2**32 + 17, isn)
print(seqno)                                    # 32

print(unwrap(seqno, isn, 3 * 2**32))            # 12884901905

print(WrappingInt32(1) - WrappingInt32(3))      # -2
print(WrappingInt32(2**32 - 1) + 2)             # 1
```

## What it does not do

This is only the sequence-number arithmetic. It does not parse or build
TCP segments, and it does not track connections, send data or reassemble
streams.

## Running the tests

```
pip install ".[test]"
pytest
```