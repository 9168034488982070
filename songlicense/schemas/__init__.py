from .song import Song, SongPayload, UpdateSongPayload
from .owner import Owner, ReturnOwner, OwnerPayload
from .license import License, LicensePayload, ProtectedPayload, ApprovePayload
from .licensee import Licensee, LicenseePayload

__all__ = [
    "Song", "SongPayload", "UpdateSongPayload",
    "Owner", "ReturnOwner", "OwnerPayload",
    "License", "LicensePayload", "ProtectedPayload", "ApprovePayload",
    "Licensee", "LicenseePayload",
]
