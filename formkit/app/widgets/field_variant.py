import enum


class FieldVariant(str, enum.Enum):
    IMAGE = "image"
    COLOR = "color"
    OTHER = "other"

    def __str__(self):
        return self.value
