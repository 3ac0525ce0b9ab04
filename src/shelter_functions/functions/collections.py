PROFILES = "publicProfiles"
PETS = "pets"
INSTITUTIONS = "institutions"
