"""User-facing messages shared by parsers and commands."""

MESSAGE_UNKNOWN_COMMAND = "Unknown command"
MESSAGE_INVALID_COMMAND_FORMAT = "Invalid command format! \n{}"
MESSAGE_INVALID_PERSON_DISPLAYED_INDEX = "The person index provided is invalid"
MESSAGE_INVALID_MEETING_DISPLAYED_INDEX = "The meeting index provided is invalid"
MESSAGE_INVALID_INDEX = "Index is not a non-zero unsigned integer."
MESSAGE_PERSONS_LISTED_OVERVIEW = "{} persons listed!"
MESSAGE_MEETINGS_LISTED_OVERVIEW = "{} meetings listed!"
MESSAGE_NOT_EDITED = "At least one field to edit must be provided."
