"""Global constants for pro application.

This module contains application-wide constants shared by the command tree,
the provisioning pipeline and the cloud-init synthesizer.
"""

DEFAULT_TAG = "pro"
"""Tag applied to every instance provisioned by pro.

Always the first element of a composed tag set so pro-managed instances can
be filtered with a single tag on any provider.
"""

DIGITALOCEAN_PROVIDER_TAG = "digitalocean"
"""Provider tag appended right after the default tag for DigitalOcean droplets."""

DIGITALOCEAN_IMAGE = "centos-stream-9-x64"
"""Droplet image slug.

The cloud-init payload installs packages with dnf, so the image must be a
RHEL-family distribution.
"""

GITHUB_URL_PREFIX = "https://github.com/"
"""Prefix used to expand `owner/name` repository shorthands into clone URLs."""

ANSIBLE_CHECKOUT_DIR = "/opt/ansible"
"""Directory on the instance where the playbook repository is cloned."""

SSH_USER = "root"
"""Login user for interactive SSH sessions on provisioned droplets."""

CONFIG_ENV_VAR = "PRO_CONFIG"
"""Environment variable holding the path to the YAML configuration file."""

DEFAULT_CONFIG_FILE = "pro.yaml"
"""Configuration file read when PRO_CONFIG is not set."""

DEBUG_ENV_VAR = "PRO_DEBUG"
"""Environment variable enabling debug logging and raw tracebacks when set to 1."""

EXIT_SUCCESS = 0
"""Exit code indicating successful program completion."""

EXIT_ERROR = 1
"""Exit code indicating a general application error.

Returned for unauthenticated or missing tools, provider CLI failures, empty
interactive selections and failed SSH sessions.
"""

EXIT_CONFIG_ERROR = 2
"""Exit code indicating a usage or configuration error.

Used when a required flag is missing or the configuration file is invalid.
"""

HELP_COLUMN_WIDTH = 15
"""Width of the command name column in the grouped help output."""

GENERAL_COMMANDS = ("help", "completion")
"""Commands listed under the General Commands help group."""

EXIT_INTERRUPTED = 130
"""Exit code used when the user interrupts the run with Ctrl+C."""
