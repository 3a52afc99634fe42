"""Serializers for the core app (roles, current user, auth payloads)."""

from django.contrib.auth import authenticate

from rest_framework import serializers
from rest_framework_simplejwt.exceptions import TokenError
from rest_framework_simplejwt.tokens import RefreshToken

from hms_backend.core.models import Role, User


class RoleSerializer(serializers.ModelSerializer):
    class Meta:
        model = Role
        fields = ['id', 'name', 'label']
        read_only_fields = fields


class UserMeSerializer(serializers.ModelSerializer):
    """The signed-in user's profile: who they are and what role they hold."""

    role = RoleSerializer(read_only=True)
    full_name = serializers.CharField(read_only=True)

    class Meta:
        model = User
        fields = ['id', 'username', 'email', 'full_name', 'is_active', 'role']
        read_only_fields = fields


class LoginSerializer(serializers.Serializer):
    username = serializers.CharField()
    password = serializers.CharField(write_only=True, trim_whitespace=False)

    def validate(self, attrs):
        user = authenticate(
            request=self.context.get('request'),
            username=attrs['username'],
            password=attrs['password'],
        )
        # ModelBackend returns None for inactive accounts too.
        if user is None:
            raise serializers.ValidationError('Invalid username or password.')

        attrs['user'] = user
        return attrs


class RefreshSerializer(serializers.Serializer):
    """A refresh token that is well formed, unexpired and not blacklisted."""

    refresh = serializers.CharField()

    def validate_refresh(self, value):
        try:
            RefreshToken(value)
        except TokenError as exc:
            raise serializers.ValidationError(f'Invalid refresh token: {exc}')
        return value
