from django import forms


class JoinForm(forms.Form):
    name = forms.CharField(max_length=200)
    email = forms.CharField(max_length=254)
    mobile = forms.CharField(max_length=20, required=False)
    sponsor_code = forms.CharField()
    position = forms.CharField()
    password = forms.CharField(strip=False)


class LoginForm(forms.Form):
    email = forms.CharField(max_length=254)
    password = forms.CharField(strip=False)
