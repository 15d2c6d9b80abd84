from django.urls import reverse
from rest_framework import status
from rest_framework.test import APITestCase


class TestProductsApi(APITestCase):
    def setUp(self):
        self.list_url = reverse('api-products-list')
        self.detail_url = lambda pid: reverse('api-products-detail', args=[pid])

    def _create(self, name='Widget', price=10.0, category='tools'):
        res = self.client.post(
            self.list_url, {'name': name, 'price': price, 'category': category}, format='json'
        )
        self.assertEqual(res.status_code, status.HTTP_201_CREATED)
        return res.data

    def test_create_and_get_product(self):
        created = self._create()
        res = self.client.get(self.detail_url(created['id']))
        self.assertEqual(res.status_code, status.HTTP_200_OK)
        self.assertEqual(res.data['name'], 'Widget')
        self.assertEqual(res.data['price'], 10.0)

    def test_list_filters_by_category(self):
        self._create('Hammer', 12, 'tools')
        self._create('Apple', 0.5, 'food')
        res = self.client.get(self.list_url, {'category': 'food'})
        self.assertEqual([p['name'] for p in res.data], ['Apple'])
        self.assertEqual(len(self.client.get(self.list_url).data), 2)

    def test_patch_and_put(self):
        created = self._create()
        patched = self.client.patch(self.detail_url(created['id']), {'price': 11}, format='json')
        self.assertEqual(patched.status_code, status.HTTP_200_OK)
        self.assertEqual((patched.data['name'], patched.data['price']), ('Widget', 11.0))
        put = self.client.put(
            self.detail_url(created['id']), {'name': 'Gadget', 'price': 3}, format='json'
        )
        self.assertEqual(put.data['category'], '')

    def test_delete_product(self):
        created = self._create()
        res = self.client.delete(self.detail_url(created['id']))
        self.assertEqual(res.status_code, status.HTTP_204_NO_CONTENT)
        missing = self.client.get(self.detail_url(created['id']))
        self.assertEqual(missing.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(missing.data['error']['code'], 'NOT_FOUND')

    def test_update_missing_product(self):
        res = self.client.put(self.detail_url(999), {'name': 'X', 'price': 1}, format='json')
        self.assertEqual(res.status_code, status.HTTP_404_NOT_FOUND)
