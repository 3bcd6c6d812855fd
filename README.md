# tps6699x

Pure-Python helpers for working with TPS6699x USB Power Delivery controllers:
a small state machine for reading from a stream of separate byte chunks, and
a model of the Tx Identity register.

## Installation

```
pip install .
```

To run the test suite, install the `test` extra and run pytest:

```
pip install ".[test]"
pytest
```

## Streams

`tps6699x.stream` presents a sequence of separate byte chunks as one
continuous stream. A stream is either a `SeekingStream`, skipping forward to
an absolute offset, or a `ReadingStream`, collecting a fixed number of bytes.
Each call consumes what it needs from a chunk and hands back the rest, so the
leftover can be passed to the next state. `Stream` is the union of the two.

```python
from tps6699x.stream import SeekingStream, ReadOperation, SeekOperation

seeking = SeekingStream(0, 2)
rest = seeking.seek_bytes(bytes([0, 1, 2, 3, 4]))   # b"\x02\x03\x04"

reading = seeking.start_read(ReadOperation(3))
result = reading.read_bytes(rest)
result.read_data        # b"\x02\x03\x04"
result.remaining_data   # b""
result.position         # 5
result.is_complete()    # True

seeking = reading.start_seek(SeekOperation(10))
```

`ReadResult.read_state` is the state of the read *before* the chunk was taken;
`ReadResult.remaining()` gives the number of bytes still needed afterwards.
When a seek target lies beyond the end of a chunk, the whole chunk is consumed
and an empty result is returned. Seeking to an offset behind the current
position raises `InvalidParamsError`, a subclass of `ValueError`.

The module logs its progress at debug level through the standard `logging`
module, under the logger name `tps6699x.stream`.

## Tx Identity register

`tps6699x.registers.tx_identity` models the 25-byte (`LEN`) Tx Identity
register at address `ADDR` (`0x47`), which supplies the Discover Identity ACK
data. `DEFAULT` holds its power-on contents.

```python
from tps6699x.registers.tx_identity import TxIdentity, ProductTypeDfp

reg = TxIdentity.default()
reg.vendor_id                   # 0x451
reg.product_type_dfp            # ProductTypeDfp.PD_USB_HOST
reg.usb_product_id = 0x1234     # fields can be assigned
payload = bytes(reg)            # 25 raw bytes

same = TxIdentity(payload)
same == reg                     # True
```

The fields are `number_valid_vdos`, `vendor_id`, `product_type_dfp`,
`modal_operation_supported`, `product_type_ufp`,
`usb_communication_capable_as_device`, `usb_communication_capable_as_host`,
`certification_test_id`, `bcd_device`, `usb_product_id`, `ufp1_vdo` and
`dfp1_vdo`. Assigning a value outside the range of a field's type raises
`ValueError`; bits beyond the field's width are dropped. Constructing a
`TxIdentity` from anything other than 25 bytes also raises `ValueError`.

`ProductTypeDfp` and `ProductTypeUfp` are enums decoded from three bits with
`from_bits`; `int()` gives their raw value and `is_reserved` tells whether the
value is one the specification reserves.

The module also offers `get_bits` and `set_bits` for reading and writing
little-endian bit ranges (most significant bit first, both ends inclusive)
within a byte buffer.

## What this package does not do

It does not talk to a controller: there is no bus access, no command
interface and no register map beyond the Tx Identity register. It only
models bytes that you read from or write to the device by other means.