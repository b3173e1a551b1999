"""Shared manifest fixtures."""

import pytest

from hwtools.plugins.loader import load_manifest

MINIMAL_TOML = '''
[tool]
name        = "i2c_scan"
version     = "1.0.0"
description = "Scan the I2C bus"

[exec]
binary = "i2c_scan.py"

[[parameters]]
name        = "device"
type        = "string"
description = "Device alias"
required    = true
'''

FULL_TOML = '''
[tool]
name        = "pwm_set"
version     = "1.0.0"
description = "Set PWM duty cycle on a pin"

[exec]
binary = "pwm_set"

[transport]
preferred       = "serial"
device_required = true

[[parameters]]
name        = "device"
type        = "string"
description = "Device alias"
required    = true

[[parameters]]
name        = "pin"
type        = "integer"
description = "PWM pin number"
required    = true

[[parameters]]
name        = "duty"
type        = "integer"
description = "Duty cycle 0-100"
required    = false
default     = 50

[[parameters]]
name        = "invert"
type        = "boolean"
description = "Invert the output"
required    = false
'''

NOOP_TOML = '''
[tool]
name        = "noop"
version     = "0.1.0"
description = "No-op tool"

[exec]
binary = "noop"
'''


@pytest.fixture
def minimal_manifest():
    return load_manifest(MINIMAL_TOML)


@pytest.fixture
def full_manifest():
    return load_manifest(FULL_TOML)


@pytest.fixture
def write_plugin(tmp_path):
    """Create a plugin directory holding the given tool.toml text."""

    def _write(dirname: str, text: str):
        plugin_dir = tmp_path / dirname
        plugin_dir.mkdir()
        (plugin_dir / "tool.toml").write_text(text, encoding="utf-8")
        return plugin_dir

    return _write
