"""
Test utilities.

Since pytest discourages putting __init__.py into testdirectory
(i.e. making tests a package) one cannot import from anywhere
under tests folder. However, some utility classes/methods might be useful
in multiple test modules (i.e. factoryboy factories, base test classes).

So this package is the place to put them.
"""
import json

from edx_rest_framework_extensions.auth.jwt.tests.utils import generate_jwt_token, generate_unversioned_payload
from pytest import mark
from rest_framework.test import APIClient, APITestCase

from media_access.apps.core.constants import UserRole
from media_access.apps.core.tests.factories import UserFactory

TEST_USERNAME = 'api_worker'
TEST_EMAIL = 'test@email.com'
TEST_PASSWORD = 'QWERTY'


@mark.django_db
class APITest(APITestCase):
    """
    Base class for API Tests.

    Requests are made as ``self.user``, a regular user logged in with a session.
    """

    def setUp(self):
        """
        Perform operations common to all tests.
        """
        super().setUp()
        self.create_user(username=TEST_USERNAME, email=TEST_EMAIL, password=TEST_PASSWORD)
        self.client = APIClient()
        self.client.login(username=TEST_USERNAME, password=TEST_PASSWORD)

    def tearDown(self):
        """
        Perform common tear down operations to all tests.
        """
        # Remove client authentication credentials
        self.client.logout()
        super().tearDown()

    def create_user(self, username=TEST_USERNAME, password=TEST_PASSWORD, is_staff=False, **kwargs):
        """
        Create a test user and set its password.
        """
        self.user = UserFactory(username=username, is_active=True, is_staff=is_staff, **kwargs)
        self.user.set_password(password)
        self.user.save()

    def login_as(self, role=UserRole.USER, **kwargs):
        """
        Replace the requesting user with a new, logged in, user holding ``role``.
        """
        self.client.logout()
        self.create_user(
            username=f'{role.lower()}_{UserFactory._meta.model.objects.count()}',
            role=role,
            **kwargs
        )
        self.client.login(username=self.user.username, password=TEST_PASSWORD)
        return self.user

    def set_jwt_header(self):
        """
        Authenticate requests with a JWT for ``self.user`` instead of the session.
        """
        self.client.logout()
        payload = generate_unversioned_payload(self.user)
        payload.update({'preferred_username': self.user.username})
        jwt_token = generate_jwt_token(payload)
        self.client.credentials(HTTP_AUTHORIZATION=f'JWT {jwt_token}')

    def load_json(self, content):
        """
        Parse content from django Response object.

        Arguments:
            content (bytes | str) : content type id bytes for PY3 and is string for PY2

        Returns:
            dict object containing parsed json from response.content
        """
        if isinstance(content, bytes):
            content = content.decode('utf-8')
        return json.loads(content)
