# acrotester

Building blocks for a device test station, with no dependencies outside the standard library.

## Modules

- `acrotester.settings`: the station's settings.
  - The `Settings` dataclass carries the station's defaults. `Settings.load(path)` reads an INI file. Keys missing from the file come back empty, and a missing file raises `FileNotFoundError`. `Settings.save(path)` writes every value back.
  - `Settings.grid_size()` and `parse_grid_size(...)` return a `GridSize`. They raise `ValueError` when rows or columns are not positive integers.
  - `visibility_for(scene)` returns a `Visibility` telling which groups of settings belong to a `Scene`: `AGING_TEST`, `AG06` or `AP8000`.
  - `browse_target(button_name)` maps a browse button such as `"btnAutoPath"` to the settings field it fills and its file filter.
- `acrotester.testsite`: `TestSite` holds a grid of `StatusBlock`s.
  - Blocks are flipped with `toggle_block`.
  - The site status and time are set with `set_status` / `update_time`. Both refresh every block's tooltip.
  - `toggle_action` starts or pauses the site and calls the functions in `start_listeners` on start.
  - `collect_blocks_status(site_rows, site_cols)` returns a JSON-ready dict with 1-based socket coordinates.
  - `status_color(status)` gives the colour of each `Status`.
- `acrotester.messages`: `MessageLog` is a log of timestamped lines.
  - Each line is typed by a `MessageType`: `SEND`, `RECEIVE`, `PARSE`, `ERROR` or `INFO`. Each type has its own label and colour.
  - The log empties itself once `max_count` lines have been written. It can strip CR/LF and can be cleared or paused.
  - `color_list`, `color_names` and `rand_color` give a built-in palette.
- `acrotester.tcpclient`: `TcpClient` is a blocking socket client.
  - It reports data, connection, disconnection and errors through callbacks.
  - `read_available(timeout)` waits for incoming data.
  - It can be used as a context manager.
- `acrotester.debugsetting`: per-programmer settings, where a programmer is identified by `ip:hop`.
  - `uart_options` and `log_level_options` list the choices.
  - `uart_index` and `log_level_index` give the stored index for a programmer.
  - `switch_uart`, `switch_log_level` and `reboot_command` build `DebugCommand`s with a JSON `body`.
- `acrotester.users`: `user_columns()` gives the user table's header. `sample_users(count)` gives placeholder `User` rows.
- `acrotester.textutil`:
  - checksums: `or_code`, `check_code`
  - XOR obfuscation: `xor_encrypt_decrypt`
  - string shortening: `cut_string`
  - formatting: `time_string`, `elapsed_string`, `size_string`
  - range mapping: `range_value`
- `acrotester.inifile`:
  - simple key lookup in INI files: `get_ini_value`, `get_ini_value_for`
  - validation: `check_ini_file`
  - style sheets: `read_style`, `palette_color`
- `acrotester.geometry`: `Size` and `Rect`.
  - centring: `center_rect`, `center_in`, `check_center_rect`
  - aspect-ratio scaling: `scale_keep_aspect`, `scaled_size`
  - choosing the screen under a point: `screen_index`
- `acrotester.randoms`: `rand_value`, `rand_float`, `rand_points`, `uuid_string`. The first three take an optional `random.Random`.
- `acrotester.system`:
  - app names and paths: `app_name`, `check_path`, `check_file`
  - `sleep`
  - commands: `run_command`, with a timeout in milliseconds
  - platform checks: `is_video_card_enabled`, `is_virtual_system`
  - dialog filter handling: `complete_extension`
  - `date_command`
  - starting a program once: `start`

## Installation

```
pip install .
```

For the tests:

```
pip install .[test]
pytest
```

## Examples

```python
from acrotester.textutil import size_string, time_string, check_code
from acrotester.settings import Settings, visibility_for, Scene

print(size_string(1536))        # "1.50 KB"
print(time_string(125_000))     # "02:05"
print(check_code(b"\x01\x02"))  # 3

settings = Settings()           # the station defaults
settings.save("file/settings.ini")
settings = Settings.load("file/settings.ini")
print(settings.grid_size())
print(visibility_for(Scene.AG06))
```

```python
from acrotester.testsite import TestSite, Status

site = TestSite(1, base_rows=2, base_cols=4, grid_rows=2, grid_cols=4)
site.toggle_block(0)
site.set_status(Status.TESTING)
print(site.collect_blocks_status(2, 4))
```

```python
from acrotester.tcpclient import TcpClient

with TcpClient(on_data=print, on_error=print) as client:
    client.connect_to_server("127.0.0.1", 64100)
    client.send_data(b"hello")
    client.read_available(1.0)
```

## What it does not do

- There is no user interface and no command-line program. The dialogs, tables and windows are for an application to draw. The package only holds their data and rules.
- `DebugCommand`s are built but not transmitted. Sending them to a programmer is up to the caller.
- `acrotester.users` has no user storage, passwords or account actions. It only provides the table layout and sample rows.
- Settings are stored only in the INI file given to `Settings.load` / `Settings.save`. They are not kept in any per-user store.