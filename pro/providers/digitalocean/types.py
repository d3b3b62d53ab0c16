"""DigitalOcean record types parsed from doctl output."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Droplet:
    """One row of ``doctl compute droplet list --format ID,Name,PublicIPv4``.

    Attributes
    ----------
    droplet_id : str
        Numeric droplet identifier
    name : str
        Droplet name
    public_ipv4 : str
        Public IPv4 address
    """

    droplet_id: str
    name: str
    public_ipv4: str

    @classmethod
    def from_listing_line(cls, line: str) -> Droplet:
        """Parse a whitespace-separated listing line.

        Parameters
        ----------
        line : str
            Line as printed by doctl (and echoed back by fzf)

        Returns
        -------
        Droplet
            Parsed record

        Raises
        ------
        ValueError
            If the line has fewer than three fields, which happens for
            droplets that have no public address yet
        """
        fields = line.split()

        if len(fields) < 3:
            raise ValueError(f"No public IPv4 address in droplet listing: {line!r}")

        return cls(droplet_id=fields[0], name=fields[1], public_ipv4=fields[2])
