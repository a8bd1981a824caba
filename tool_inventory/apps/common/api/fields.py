from rest_framework import serializers


class CaseInsensitiveChoiceField(serializers.ChoiceField):
    """``ChoiceField`` over lowercase choices that also accepts ``ASC``, ``Desc``, ..."""

    def to_internal_value(self, data):
        if isinstance(data, str):
            data = data.lower()
        return super().to_internal_value(data)
