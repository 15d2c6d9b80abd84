from django.urls import reverse
from rest_framework import status
from rest_framework.test import APITestCase

from apps.users.models import User


class TestUsersApi(APITestCase):
    def setUp(self):
        self.user = User.objects.create(name='Ada', email='ada@example.com', password='secret')
        self.list_url = reverse('api-users-list')
        self.detail_url = lambda uid: reverse('api-users-detail', args=[uid])

    def test_list_users_hides_password(self):
        res = self.client.get(self.list_url)
        self.assertEqual(res.status_code, status.HTTP_200_OK)
        self.assertEqual(res.data[0]['email'], 'ada@example.com')
        self.assertNotIn('password', res.data[0])

    def test_get_user(self):
        res = self.client.get(self.detail_url(self.user.id))
        self.assertEqual(res.status_code, status.HTTP_200_OK)
        self.assertEqual(res.data['name'], 'Ada')

    def test_get_missing_user(self):
        res = self.client.get(self.detail_url(999))
        self.assertEqual(res.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(res.data['error']['code'], 'NOT_FOUND')

    def test_patch_user_keeps_password(self):
        res = self.client.patch(self.detail_url(self.user.id), {'name': 'Ada L.'}, format='json')
        self.assertEqual(res.status_code, status.HTTP_200_OK)
        self.user.refresh_from_db()
        self.assertEqual((self.user.name, self.user.password), ('Ada L.', 'secret'))

    def test_put_requires_email(self):
        res = self.client.put(self.detail_url(self.user.id), {'name': 'X'}, format='json')
        self.assertEqual(res.status_code, status.HTTP_400_BAD_REQUEST)

    def test_update_to_taken_email_conflicts(self):
        User.objects.create(name='Bob', email='bob@example.com', password='pw')
        res = self.client.patch(
            self.detail_url(self.user.id), {'email': 'bob@example.com'}, format='json'
        )
        self.assertEqual(res.status_code, status.HTTP_409_CONFLICT)
        self.assertEqual(res.data['error']['code'], 'CONFLICT')
