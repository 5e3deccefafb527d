"""Well-known project type GUIDs found in Project("{...}") headers."""

from __future__ import annotations

import uuid

from slnparse.config import SOLUTION_FOLDER_GUID

CSHARP_GUID = uuid.UUID("FAE04EC0-301F-11D3-BF4B-00C04F79EFBC")
CSHARP_SDK_GUID = uuid.UUID("9A19103F-16F7-4668-BE54-9A1E7A4F7556")
VBNET_GUID = uuid.UUID("F184B08F-C81C-45F6-A57F-5ABD9991F28F")
FSHARP_GUID = uuid.UUID("F2A71F9B-5D33-465A-A702-920D77279786")
FSHARP_SDK_GUID = uuid.UUID("6EC3EE1D-3C4E-46DD-8F32-0CC8E7565705")
CPP_GUID = uuid.UUID("8BC9CEB8-8B4A-11D0-8D11-00A0C91BC942")
WIX_GUID = uuid.UUID("930C7802-8A8C-48F9-8165-68863BCCD9DD")
WEBSITE_GUID = uuid.UUID("E24C65DC-7377-472B-9ABA-BC803B73C61A")

PROJECT_TYPES: dict[uuid.UUID, str] = {
    CSHARP_GUID: "C#",
    CSHARP_SDK_GUID: "C# SDK-style",
    VBNET_GUID: "VB.NET",
    FSHARP_GUID: "F#",
    FSHARP_SDK_GUID: "F# SDK-style",
    CPP_GUID: "C++",
    WIX_GUID: "WiX",
    WEBSITE_GUID: "Website",
    SOLUTION_FOLDER_GUID: "SolutionFolder",
}


def describe_project_type(type_guid: uuid.UUID) -> str:
    """Return a short name for a project type GUID, or "Unknown"."""
    return PROJECT_TYPES.get(type_guid, "Unknown")
