"""
Serializable views of derived key sets.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from seedkeys.derivation import Keypair


class KeyRecord(BaseModel):
    seed: str
    private_key: str = Field(..., pattern=r"^[0-9a-f]{64}$")
    public_key: str = Field(..., pattern=r"^0[23][0-9a-f]{64}$")

    @classmethod
    def from_keypair(cls, keypair: Keypair) -> KeyRecord:
        return cls(
            seed=keypair.seed,
            private_key=keypair.private_key_hex(),
            public_key=keypair.public_key_hex(),
        )


class FixtureSet(BaseModel):
    """A derived key set, optionally with its multisig script and address."""

    keys: list[KeyRecord] = Field(default_factory=list)
    sorted: bool = False
    threshold: int | None = Field(default=None, ge=1, le=16)
    redeem_script: str | None = None
    address: str | None = None

    @classmethod
    def from_keypairs(cls, keypairs: list[Keypair], sorted: bool = False) -> FixtureSet:
        return cls(keys=[KeyRecord.from_keypair(kp) for kp in keypairs], sorted=sorted)

    def to_text(self) -> str:
        lines = [f"{k.seed} {k.public_key} {k.private_key}" for k in self.keys]
        if self.redeem_script is not None:
            lines.append(f"threshold: {self.threshold}")
            lines.append(f"redeem_script: {self.redeem_script}")
        if self.address is not None:
            lines.append(f"address: {self.address}")
        return "\n".join(lines)
