from django.urls import reverse
from rest_framework import status
from rest_framework.test import APITestCase


class TestAuth(APITestCase):
    def setUp(self):
        self.register_url = reverse('auth-register')
        self.login_url = reverse('auth-login')
        self.payload = {'name': 'Ada', 'email': 'ada@example.com', 'password': 'secret'}

    def test_register_and_login(self):
        res = self.client.post(self.register_url, self.payload, format='json')
        self.assertEqual(res.status_code, status.HTTP_201_CREATED)
        self.assertEqual(res.data['email'], 'ada@example.com')
        self.assertNotIn('password', res.data)

        login = self.client.post(
            self.login_url, {'email': 'ada@example.com', 'password': 'secret'}, format='json'
        )
        self.assertEqual(login.status_code, status.HTTP_200_OK)
        self.assertEqual(login.data['id'], res.data['id'])

    def test_register_duplicate_email(self):
        self.client.post(self.register_url, self.payload, format='json')
        res = self.client.post(self.register_url, self.payload, format='json')
        self.assertEqual(res.status_code, status.HTTP_409_CONFLICT)
        self.assertEqual(res.data['error']['code'], 'CONFLICT')

    def test_register_missing_password(self):
        res = self.client.post(
            self.register_url, {'email': 'ada@example.com'}, format='json'
        )
        self.assertEqual(res.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn('password', res.data['error']['details'])

    def test_login_wrong_password(self):
        self.client.post(self.register_url, self.payload, format='json')
        res = self.client.post(
            self.login_url, {'email': 'ada@example.com', 'password': 'nope'}, format='json'
        )
        self.assertEqual(res.status_code, status.HTTP_401_UNAUTHORIZED)
        self.assertEqual(res.data['error']['code'], 'UNAUTHORIZED')

    def test_login_unknown_email_looks_like_wrong_password(self):
        res = self.client.post(
            self.login_url, {'email': 'ghost@example.com', 'password': 'secret'}, format='json'
        )
        self.assertEqual(res.status_code, status.HTTP_401_UNAUTHORIZED)
        self.assertEqual(res.data['error']['message'], 'Invalid email or password')

    def test_login_empty_password_matches_wrong_password(self):
        self.client.post(self.register_url, self.payload, format='json')
        wrong = self.client.post(
            self.login_url, {'email': 'ada@example.com', 'password': 'nope'}, format='json'
        )
        empty = self.client.post(
            self.login_url, {'email': 'ada@example.com', 'password': ''}, format='json'
        )
        self.assertEqual(empty.status_code, status.HTTP_401_UNAUTHORIZED)
        self.assertEqual(empty.data, wrong.data)

    def test_login_empty_email_is_unauthorized(self):
        res = self.client.post(
            self.login_url, {'email': '', 'password': 'secret'}, format='json'
        )
        self.assertEqual(res.status_code, status.HTTP_401_UNAUTHORIZED)
        self.assertEqual(res.data['error']['code'], 'UNAUTHORIZED')
