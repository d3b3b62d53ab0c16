"""Cloud-init user-data synthesis for first-boot Ansible runs."""

from __future__ import annotations

from pro.constants import ANSIBLE_CHECKOUT_DIR

CLOUD_INIT_TEMPLATE = """\
#cloud-config
packages:
  - git
  - python3-pip
runcmd:
  - echo "Updating system packages..."
  - dnf install -y python3-pip
  - pip3 install --upgrade pip ansible
  - echo "Cloning repository..."
  - git clone -b {branch} {repo_url} {checkout_dir} || (cd {checkout_dir} && git pull)
  - echo "Running playbook..."
  - cd {checkout_dir}/{playbook_path}
  - ansible-playbook -i "localhost," -c local playbook.yml
"""


def generate_cloud_init(repo_url: str, branch: str, playbook_path: str) -> str:
    """Render the cloud-config document passed as droplet user-data.

    On first boot the instance installs git and pip (once through the
    packages stanza and again with dnf, since the stanza is not honoured
    uniformly across images), installs Ansible, clones the branch into
    /opt/ansible (pulling instead when the checkout already exists) and runs
    ``playbook.yml`` from ``playbook_path`` against localhost.

    Values are interpolated verbatim; callers must not pass characters that
    break the YAML list items or the shell commands.

    Parameters
    ----------
    repo_url : str
        Clone URL of the playbook repository
    branch : str
        Branch to clone
    playbook_path : str
        Directory inside the repository containing playbook.yml

    Returns
    -------
    str
        Cloud-init document starting with ``#cloud-config``
    """
    return CLOUD_INIT_TEMPLATE.format(
        branch=branch,
        repo_url=repo_url,
        checkout_dir=ANSIBLE_CHECKOUT_DIR,
        playbook_path=playbook_path,
    )
