# eraserapi

Python models for the configuration and custom resources of an
image-cleanup controller that removes unused container images from
Kubernetes nodes. It has no dependencies beyond the standard library.

## Modules

- `eraserapi.duration`: `parse_duration(text)` turns strings such as
  `"24h"`, `"1m30s"`, `"1.5h"` or `"500ms"` into a whole number of
  nanoseconds. `format_duration(nanoseconds)` renders them back in
  canonical form (`"24h0m0s"`, `"1m30s"`, `"500ms"`, `"0s"`). Malformed
  strings, strings without a unit and values too large for a signed
  64-bit count raise `ValueError`. The module also exports the unit
  constants `NANOSECOND`, `MICROSECOND`, `MILLISECOND`, `SECOND`,
  `MINUTE` and `HOUR`.
- `eraserapi.quantity`: `Quantity`, an exact resource amount such as
  `"25Mi"`, `"7m"`, `"2Gi"` or `"1e3"`. `Quantity.parse` raises
  `ValueError` on malformed input and rounds values finer than a
  nano-unit upwards. `to_json()` (also `str()`) returns the canonical
  form, keeping binary suffixes for binary quantities. `is_zero()`
  tests for zero. Equality compares amounts only.
- `eraserapi.types`: the shared building blocks. `Runtime` (`containerd`,
  `dockershim`, `crio`; `Runtime.parse` raises `ValueError` for anything
  else), `JobPhase`, `RepoTag`, `ResourceRequirements`,
  `ContainerConfig`, `OptionalContainerConfig`, `ScheduleConfig`,
  `ProfileConfig`, `ImageJobCleanupConfig`, `ImageJobConfig`,
  `NodeFilterConfig`, `ManagerConfig`, `Image`, `ObjectMeta`,
  `ImageJobStatus`, `ImageJob`, `ImageListSpec`, `ImageListStatus` and
  `ImageList`. Each has `to_dict()` and `from_dict()`, which use the
  camel-case JSON field names. Durations are stored as nanoseconds and
  timestamps as `datetime`.
- `eraserapi.eraserconfig`: `EraserConfig` and `Components` (collector,
  scanner, remover) for the current schema, which is both the `v1alpha2`
  form and the internal unversioned form. They have `to_dict`/`from_dict`,
  and `EraserConfig` also has `to_json`/`from_json`.
- `eraserapi.v1alpha1`: the older `EraserConfig` and `Components`, where
  the remover component is named `eraser`. `to_unversioned` and
  `from_unversioned` convert between the two shapes. They copy the
  manager and component settings but not `apiVersion`/`kind`.
- `eraserapi.schema`: `GroupVersion` (with `api_version()`, for example
  `"eraser.sh/v1"`), the constants `GROUP`, `UNVERSIONED`, `V1`,
  `V1ALPHA1` and `V1ALPHA2`, and `Scheme`.
  - `Scheme.register` registers classes, or `(kind, class)` pairs, under
    a group version. Registering a different class under a kind that is
    already taken raises `ValueError`.
  - `Scheme.lookup(api_version, kind)` returns the class or raises
    `KeyError`.
  - `Scheme.known_kinds` lists the kinds of a group version in sorted
    order. `Scheme.group_versions` lists the registered group versions.
  - `build_scheme()` returns a scheme with every kind of the `eraser.sh`
    group: `EraserConfig` in `unversioned`, `v1alpha1` and `v1alpha2`,
    and `ImageJob`, `ImageJobList`, `ImageList` and `ImageListList` in
    `v1` and `v1alpha1`.
- `eraserapi.config`: `ConfigManager` and the default configurations.
  - `ConfigManager` is a lock-guarded holder of the active configuration.
    `read()` returns a deep copy. `update(new_config)` stores a deep copy.
    Both raise `ValueError` when no configuration is held, and `update`
    also raises when `new_config` is `None`.
  - `default_config`, `default_v1alpha1_config` and
    `default_v1alpha2_config` each take `build_version` and
    `default_repo` and return the default settings: the `containerd`
    runtime, log level `info`, a 24-hour repeat interval, profiling port
    6060, success ratio 1.0, the `exclude` node filter on
    `eraser.sh/cleanup.filter`, and collector, scanner and remover
    resource requests and limits. The collector and scanner are disabled.
  - `repo(basename, default_repo)` prefixes an image name with the
    default repository when one is given.
  - `DEFAULT_SCANNER_CONFIG` holds the scanner's default settings as
    YAML text.

## Installation

```
pip install eraserapi
```

## Example

```python
from eraserapi.config import ConfigManager, default_config
from eraserapi.duration import format_duration
from eraserapi.eraserconfig import EraserConfig

config = default_config("v1.1.0", "ghcr.io/example")
print(config.components.remover.image.repo)                    # ghcr.io/example/remover
print(format_duration(config.manager.scheduling.repeat_interval))  # 24h0m0s

manager = ConfigManager(config)
loaded = EraserConfig.from_json('{"manager": {"runtime": "crio"}, "components": {}}')
manager.update(loaded)
print(manager.read().manager.runtime.value)                    # crio
```

## What this package does not do

This package only models and checks data. It has:

- no controller, and it never talks to a Kubernetes cluster;
- no command-line program;
- no YAML parser. Configurations are read from and written to JSON or
  plain dictionaries, and the scanner settings are kept as unparsed
  text.

## Running the tests

```
pip install -e ".[test]"
pytest
```