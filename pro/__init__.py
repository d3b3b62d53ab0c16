"""Provision short-lived cloud servers bootstrapped by an Ansible playbook."""

__version__ = "0.1.0"
