"""
Base model shared by every record of the setup tool.
"""

from pydantic import BaseModel, ConfigDict


class FeedSetupBaseModel(BaseModel):
    """
    Base model for all Hive Feed Setup records.
    Common configuration and strict validation.
    """

    model_config = ConfigDict(
        # Validate values on assignment
        validate_assignment=True,
        # Use enum values
        use_enum_values=True,
        # Prevent extra fields
        extra="forbid",
        # Strip surrounding whitespace from every string field
        str_strip_whitespace=True,
    )
