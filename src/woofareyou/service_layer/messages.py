"""User-facing message templates produced by command handlers."""

# --- Usage ---

ADD_USAGE = (
    "add: Adds a pet to WoofAreYou.\n"
    "Parameters: --name NAME --phone PHONE --owner OWNER_NAME --address ADDRESS "
    "[--tag TAG]...\n"
    "Example: add --name Rex --phone 98765432 --owner \"John Doe\" "
    "--address \"311, Clementi Ave 2, #02-25\" --tag Poodle"
)
EDIT_USAGE = (
    "edit: Edits the details of the pet identified by the index number used in "
    "the displayed pet list. Existing values will be overwritten by the input values.\n"
    "Parameters: INDEX (must be a positive integer) [--name NAME] [--phone PHONE] "
    "[--owner OWNER_NAME] [--address ADDRESS] [--tag TAG]...\n"
    "Example: edit 1 --phone 91234567"
)
DELETE_USAGE = (
    "delete: Deletes the pet identified by the index number used in the displayed pet list.\n"
    "Parameters: INDEX (must be a positive integer)\n"
    "Example: delete 1"
)
FIND_USAGE = (
    "find: Finds all pets whose name, owner or tags contain any of the specified "
    "keywords (case-insensitive) and displays them as a list with index numbers.\n"
    "Parameters: [--by name|owner|tag] KEYWORD [MORE_KEYWORDS]...\n"
    "Example: find Rex Bella"
)
SORT_USAGE = (
    "sort: Sorts the displayed pet list by the given field.\n"
    "Parameters: FIELD (one of {fields})\n"
    "Example: sort name"
)
CHARGE_USAGE = (
    "charge: Computes a month's charge of the pet identified by the index number "
    "used in the displayed pet list.\n"
    "Parameters: INDEX (must be a positive integer) --month MM-yyyy --cost COST\n"
    "Example: charge 1 --month 03-2022 --cost 200"
)

# --- Errors ---

INVALID_PET_DISPLAYED_INDEX = "The pet index provided is invalid"
DUPLICATE_PET = "This pet already exists in WoofAreYou"
NOT_EDITED = "At least one field to edit must be provided."
NOTHING_TO_UNDO = "There is nothing to undo!"
NO_CHARGE_SET = "No charge has been set!\n{usage}"
UNKNOWN_SORT_FIELD = "Unknown sort field: {field}\n{usage}"

# --- Success ---

ADD_SUCCESS = "New pet added: {pet}"
EDIT_SUCCESS = "Edited Pet: {pet}"
DELETE_SUCCESS = "Deleted Pet: {pet}"
PETS_LISTED_OVERVIEW = "{count} pets listed!"
LIST_SUCCESS = "Listed all pets"
SORT_SUCCESS = "Pets sorted by {field}"
CLEAR_SUCCESS = "WoofAreYou has been cleared!"
UNDO_SUCCESS = "Undo success!"
CHARGE_SUCCESS = "{pet_name} should be charged ${amount:.2f} for the month of {month}."
PRESENT_SUCCESS = "Marked {pet_name} as present on {day}."
ABSENT_SUCCESS = "Marked {pet_name} as absent on {day}."
DIET_ADDED = "Added special diet requirement for {pet_name}: {diet}"
DIET_REMOVED = "Removed special diet requirement for {pet_name}"
APPOINTMENT_ADDED = "Added appointment for {pet_name}: {appointment}"
APPOINTMENT_CLEARED = "Cleared appointment for {pet_name}"
SHOWING_HELP = "Opened help window."
EXITING = "Exiting WoofAreYou as requested ..."
