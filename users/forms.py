# users/forms.py
from django import forms


class PasswordResetRequestForm(forms.Form):
    email = forms.EmailField(label="Email")

    def clean_email(self):
        return self.cleaned_data["email"].lower().strip()


class EmailTokenForm(forms.Form):
    token = forms.CharField(max_length=64)
