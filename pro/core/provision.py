"""Droplet provisioning with cloud-init driven Ansible bootstrap."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from pro.cloudinit import generate_cloud_init
from pro.constants import DIGITALOCEAN_IMAGE, DIGITALOCEAN_PROVIDER_TAG
from pro.core.config import ConfigLoader
from pro.providers.digitalocean import DoctlClient
from pro.providers.exceptions import ProviderCredentialsError
from pro.utils import process_tags, validate_and_get_repo_url

logger = logging.getLogger(__name__)

DOCTL_AUTH_MESSAGE = (
    "DigitalOcean CLI (`doctl`) is not authenticated. Run `doctl auth init` first."
)


@dataclass
class CreateOptions:
    """Resolved options for a single droplet creation.

    Attributes
    ----------
    repo : str
        Repository URL or GitHub ``owner/name``
    branch : str
        Branch to clone
    playbook_path : str
        Directory in the repository holding playbook.yml
    instance_name : str
        Droplet name
    region : str
        Region slug
    size : str
        Size slug
    user_tags : str
        Extra comma-separated tags, possibly empty
    """

    repo: str
    branch: str = "main"
    playbook_path: str = "src/pro"
    instance_name: str = "QuickSearch"
    region: str = "sfo3"
    size: str = "s-1vcpu-1gb"
    user_tags: str = ""


def ensure_doctl_ready(client: DoctlClient) -> None:
    """Verify doctl is installed and authenticated.

    Raises
    ------
    ToolNotFoundError
        If doctl is not installed
    ProviderCredentialsError
        If doctl has no valid credentials
    """
    client.check_installed()

    if not client.is_authenticated():
        raise ProviderCredentialsError(DOCTL_AUTH_MESSAGE)


class ProvisionManager:
    """Creates DigitalOcean droplets that configure themselves on first boot.

    Parameters
    ----------
    config_loader : ConfigLoader
        Loader providing file and built-in defaults
    doctl_client : DoctlClient
        Adapter used for every provider call
    """

    def __init__(self, config_loader: ConfigLoader, doctl_client: DoctlClient) -> None:
        self.config_loader = config_loader
        self.doctl_client = doctl_client

    def resolve_options(self, **cli_values: Any) -> CreateOptions:
        """Merge CLI values over the configured defaults.

        Empty strings and None count as unset, so ``--branch ""`` still gets
        the default branch.

        Parameters
        ----------
        **cli_values : Any
            Values keyed like ``ConfigLoader.BUILT_IN_DEFAULTS``

        Returns
        -------
        CreateOptions
            Fully resolved options

        Raises
        ------
        ValueError
            If no repository was given on the command line or in the config
        """
        config = self.config_loader.load_config()
        merged = self.config_loader.get_provider_config(config, DIGITALOCEAN_PROVIDER_TAG)

        for key, value in cli_values.items():
            if value is not None and value != "":
                merged[key] = value

        if not merged["repo"]:
            raise ValueError("--repo flag is required")

        for key in ("branch", "playbook_path", "name", "region", "size"):
            if not merged[key]:
                merged[key] = ConfigLoader.BUILT_IN_DEFAULTS[key]

        return CreateOptions(
            repo=merged["repo"],
            branch=merged["branch"],
            playbook_path=merged["playbook_path"],
            instance_name=merged["name"],
            region=merged["region"],
            size=merged["size"],
            user_tags=merged["tags"],
        )

    def create(
        self,
        repo: str | None = None,
        branch: str | None = None,
        playbook_path: str | None = None,
        name: str | None = None,
        region: str | None = None,
        size: str | None = None,
        tags: str | None = None,
    ) -> None:
        """Create a droplet that clones the repository and runs its playbook.

        Parameters
        ----------
        repo : str | None
            Repository URL or GitHub ``owner/name`` (required)
        branch : str | None
            Branch to clone
        playbook_path : str | None
            Directory holding playbook.yml
        name : str | None
            Droplet name
        region : str | None
            Region slug
        size : str | None
            Size slug
        tags : str | None
            Extra comma-separated tags

        Raises
        ------
        ToolNotFoundError
            If doctl is not installed
        ProviderCredentialsError
            If doctl is not authenticated
        ValueError
            If no repository is given
        ProviderAPIError
            If a doctl call fails
        """
        ensure_doctl_ready(self.doctl_client)

        options = self.resolve_options(
            repo=repo,
            branch=branch,
            playbook_path=playbook_path,
            name=name,
            region=region,
            size=size,
            tags=tags,
        )
        repo_url = validate_and_get_repo_url(options.repo)
        all_tags = process_tags(DIGITALOCEAN_PROVIDER_TAG, options.user_tags)

        logger.info("Generating Cloud Init script for DigitalOcean...", extra={"stream": "stdout"})
        cloud_init = generate_cloud_init(repo_url, options.branch, options.playbook_path)
        logger.debug("Cloud-init user data:\n%s", cloud_init)

        ssh_keys = self.doctl_client.list_ssh_keys()

        logger.info(
            "Creating DigitalOcean droplet '%s' in region '%s' with tags: %s...",
            options.instance_name,
            options.region,
            all_tags,
            extra={"stream": "stdout"},
        )
        output = self.doctl_client.create_instance(
            name=options.instance_name,
            region=options.region,
            image=DIGITALOCEAN_IMAGE,
            size=options.size,
            ssh_keys=ssh_keys,
            user_data=cloud_init,
            tags=all_tags,
        )
        logger.debug("doctl output:\n%s", output)

        logger.info(
            "Droplet '%s' created successfully with tags: %s.",
            options.instance_name,
            all_tags,
            extra={"stream": "stdout"},
        )
