# saikodev

Tools and hardware definitions for building software that runs on 68000-based
arcade boards and consoles: Capcom CPS and CPS2, Sega System 16B and
System 18, with input layouts also covering System C/C2, the Mega Drive and
Atlus ESP Ra.De. hardware.

The package has two halves:

* command-line utilities that turn binary assets into assembler or C sources,
  pad images to EPROM-friendly sizes, interleave and byte-swap ROM images, and
  upload a cartridge image to a Mega EverDrive-style loader over a serial port;
* Python models of the hardware: targets and their input bit layouts, memory
  maps, palette formats and palette command queues, CPS video registers,
  sprite lists and I/O port addresses.

No third-party libraries are needed. Install with `pip install .`; the tests
run with `pip install .[test]` and `pytest`.

## Command-line tools

### bin2s

Writes GNU assembler for one or more binary files to standard output. Each file
becomes two symbols named after its path, with every character that is not an
ASCII letter or digit replaced by `_` (and a `_` put in front of an initial
digit): `res/kitten.chr` becomes `res_kitten_chr`, preceded by
`res_kitten_chr_size`, a `.dc.l` holding the file's length. Data is written
sixteen bytes per `.byte` line.

    bin2s res/kitten.chr res/font.chr > assets.s

A file `res/kitten.chr.cfg` holding `align 4` changes that file's `.balign`
(the default is 2; the value may be decimal, `0x` hexadecimal or
`0`-prefixed octal). Arguments containing `.cfg` are skipped, and empty files
are skipped with a warning. `bin2s --help` prints the usage text.

### bin2h

Prints `extern const uint8_t name[size];` declarations so a header can be
collected alongside the `bin2s` output. Here the name is the path with `/`,
`\` and `.` replaced by `_`; no other characters are changed. Arguments
containing `.cfg` and empty files are skipped.

    bin2h res/kitten.chr res/font.chr > assets.h

### bin2arr

Writes `<symbol>.c` holding a `const uint8_t` array with the file's contents,
16 values per line unless another count is given. A count below 1 falls back
to 16 with a warning.

    bin2arr logo.bin logo_data 8

### binpad

Pads a file in place with `0xFF` up to the next power of two (at least 2
bytes), or up to a minimum size when that is larger. The minimum may be
decimal, `0x` hexadecimal or `0`-prefixed octal. The old and new sizes are
printed.

    binpad out/prg.bin 0x200000

### bsplit

Splits, combines and swaps ROM images.

    bsplit s in.bin out.even out.odd [bytes per]
    bsplit c in.even in.odd out.bin [bytes per]
    bsplit x in.bin out.bin
    bsplit n in.bin out.bin
    bsplit z in.bin out.bin

`s` deals the input out to two files in runs of *bytes per* (default 1), `c`
interleaves them back together, stopping once the odd input runs out in the
middle of a run, `x` swaps each pair of bytes (a trailing odd byte is
dropped), `n` swaps the nybbles of every byte and `z` swaps the 2-bit pairs
within each nybble. Run without arguments, or with too few, it prints usage.

### megaloader

Sends an image to a Mega EverDrive loader over a serial device and starts it.
The image type is one of `sms`, `os`, `cd`, `m10` or `md` (use `md` if unsure).

    megaloader md out/game.bin /dev/ttyUSB0

Images larger than `0xF00000` bytes (15 MiB) are refused; smaller ones are
padded with `0xFF` to a whole number of 64 KiB blocks. Opening the serial
device uses `termios`, so the command needs a POSIX system. Progress is
logged to standard output; a failed step prints its reason and exits with
status 1.

## Library use

The same operations are available as functions:

```python
from saikodev import binpad, bsplit, bin2s

binpad.padded_size(5, 0)          # 8
even, odd = bsplit.split(b"\x01\x02\x03\x04", 1)
data = bsplit.combine(even, odd, 1)
swapped = bsplit.exchange(data)
source = bin2s.render("res/kitten.chr", b"\x00\x01", 4)
```

The loader protocol works over any object with `read(size)` and
`write(data)` methods (and an optional `flush()`), so it can be driven without
a real device:

```python
from saikodev.megaloader import MedLoader, LoaderError

MedLoader(port).load(rom_bytes, "md")   # raises LoaderError on a bad reply
```

Hardware definitions are selected by target:

```python
from saikodev.target import Target, button_map
from saikodev.memmap import memory_map
from saikodev.cps_obj import ObjList, obj_size, obj_at16
from saikodev.palcmd import PalCmdQueue
from saikodev.palette import CpsPalette, cps_pal888

buttons = button_map(Target.CPS2)
layout = memory_map(Target.CPS2)

queue = PalCmdQueue(16)
palette = CpsPalette(queue, layout.cram_base)
palette.set(0, cps_pal888(0xFF, 0x80, 0x00))

sprites = ObjList.for_target(Target.CPS2)
sprites.draw(64, 32, 0x100, obj_at16(3, obj_size(2, 2)))
for obj in sprites:
    record = obj.pack()               # 8 big-endian bytes
```

`PalCmdQueue.add` returns `None` once the queue is full, until `clear()` is
called. `ObjList.draw` stops adding sprites once the list reaches its capacity
(256 on CPS, 1024 on CPS2); further calls step back through the list and
return the existing entries unchanged.

Other modules:

* `saikodev.target` – `Target`, `bit`, `is_pow2`, `button_map` and
  `player_count`.
* `saikodev.irq` – `classify_handler` sorts a 32-bit interrupt callback
  pointer into a `HandlerKind` by its top byte.
* `saikodev.memmap` – `memory_map` for `CPS`, `CPS2`, `S16B` and `S18`;
  other targets raise `ValueError`.
* `saikodev.palette` – CPS and System 16 colour encoders (`cps_pal444` …
  `cps_palhex`, `s16_pal555` … `s16_palhex`) and the `CpsPalette` and
  `S16Palette` command builders.
* `saikodev.cps_ppu` – CPS-A/CPS-B register offsets, `Plane`,
  `layer_order`, `bg_attr`, `scroll1_offset` … `scroll3_offset`,
  `scroll_x_register` and `scroll_y_register`.
* `saikodev.io_map` – `CpsIoPort`, `Cps2IoPort`, `S16IoPort`,
  `S18PlayerBits`, the address helpers `cps_io_address`, `cps2_io_address`
  and `s16_io_address`, `s16_mapper_region_offsets` and
  `s18_io_control_default`.

## What it does not do

The package describes the hardware; it does not run on it or emulate it. There
is no assembler, linker or build driver here: the converters produce source
files for a cross toolchain you supply. Memory maps for the Mega Drive, System
C/C2 and ESP Ra.De. boards are not included, and the palette, sprite and I/O
models cover only CPS, CPS2, System 16B and System 18.