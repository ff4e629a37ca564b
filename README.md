# gatus

Load, merge and validate the YAML configuration of a health-check status page.

The package reads a single configuration file, or every `.yml`/`.yaml` file
below a directory deep-merged together, expands environment variables and then
validates the `web`, `ui`, `maintenance` and `connectivity` sections, filling
in defaults where a section is missing.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Loading a configuration

```python
from gatus.config import load_configuration

config = load_configuration("config/config.yaml")
print(config.web.socket_address())        # "0.0.0.0:8080" unless configured
print(config.ui.title)
```

`load_configuration(config_path)` tries `config_path`, then
`config/config.yaml`, then `config/config.yml`, and uses the first that
exists. A path may be a file or a directory. For a directory, every `.yml` and
`.yaml` file below it is read recursively in lexical order and merged with
`deep_merge`: nested mappings merge, lists are concatenated, and a key holding
any other value in more than one file raises `ConfigError`.

Errors, all subclasses of `ValueError` through `gatus.config.ConfigError`
or their own section's error class:

- `ConfigFileNotFoundError` when no path exists or nothing was read;
- `NoEndpointError` when the configuration has no `endpoints` list, or an
  empty one;
- `ConfigError` for unparsable YAML or a top level that is not a mapping;
- the section errors listed below.

Environment variables written as `$NAME` or `${NAME}` are expanded before
parsing, unset ones becoming empty; write `$$` for a literal dollar sign.
`expand_env`, `deep_merge`, `iter_config_files` and `parse_and_validate` can
be used on their own.

The returned `Config` holds `debug`, `metrics`, `skip_invalid_config_update`
and `disable_monitoring_lock` flags, the validated section objects, and
`config_path`. After loading, `config.has_loaded_configuration_been_modified()`
reports whether the file, or any configuration file in the directory, changed
since it was read, and `config.update_last_file_mod_time()` resets that point.

## Sections

- `web` (`gatus.web.WebConfig`): `address` (default `0.0.0.0`) and `port`
  (default `8080`, at most `65535`), and an optional `tls` block with
  `certificate-file` and `private-key-file`; both must be given and must load
  as a key pair. Errors raise `WebConfigError`. `has_tls()` and
  `socket_address()` are available.
- `ui` (`gatus.ui.UIConfig`): `title`, `description`, `header`, `logo`, `link`
  and a list of `buttons`. Empty title, description and header get default
  texts; a button without both `name` and `link` raises
  `ButtonValidationError`.
- `maintenance` (`gatus.maintenance.MaintenanceConfig`): a UTC window given by
  `start` (`hh:mm`), `duration` (more than 0, at most 24 hours) and optional
  `every` weekdays (`Sunday` … `Saturday`). Missing, it is disabled. Errors
  raise `InvalidStartFormatError`, `InvalidDurationError` or
  `InvalidDayNameError`, all `MaintenanceError`.
  `is_under_maintenance(now)` tells whether a moment (default: now) falls
  inside the window.
- `connectivity` (`gatus.connectivity.ConnectivityConfig`): a `checker` whose
  `target` must end in `:53` (`InvalidDNSTargetError`) and whose `interval`
  is at least `5s` (`InvalidIntervalError`), defaulting to `60s`.
  `Checker.is_connected()` opens a TCP connection to the target and caches the
  result for one interval; `can_create_tcp_connection(address, timeout)` does
  the probe on its own.

```python
from datetime import datetime, timezone
from gatus.maintenance import MaintenanceConfig

window = MaintenanceConfig.from_dict({"start": "23:00", "duration": "1h"})
window.validate_and_set_defaults()
window.is_under_maintenance(datetime(2024, 1, 1, 23, 30, tzinfo=timezone.utc))  # True
```

Durations follow the `300ms`, `1.5h`, `2h45m` notation, with units `ns`,
`us`, `ms`, `s`, `m` and `h`, and are parsed by
`gatus.duration.parse_duration`; integers are taken as nanoseconds.

## What this package does not do

It only loads and checks configuration. It does not probe endpoints, send
alerts, store results or serve a dashboard. The `endpoints`, `security`,
`alerting`, `storage` and `remote` sections are kept on `Config` exactly as
parsed from YAML and are not validated.