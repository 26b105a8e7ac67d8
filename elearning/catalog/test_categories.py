"""
Taxonomy tests - defaults, admin updates and access control
"""
from rest_framework.test import APIClient, APITestCase

from admin.testing import make_admin, make_profile, sign_in
from catalog.models import PlatformConfig, Chapter
from catalog.services import categories


class CategoryReadTests(APITestCase):

    def setUp(self):
        self.client = APIClient()

    def test_defaults_are_served_and_persisted(self):
        response = self.client.get('/api/categories/')
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.data['classes'], categories.DEFAULT_CLASSES)
        self.assertEqual(response.data['subjects'], categories.DEFAULT_SUBJECTS)
        self.assertEqual(response.data['chapters']['PHYSICS'], categories.DEFAULT_CHAPTERS['PHYSICS'])
        self.assertTrue(PlatformConfig.objects.filter(key='classes').exists())
        self.assertTrue(PlatformConfig.objects.filter(key='subjects').exists())

    def test_empty_stored_list_falls_back_to_defaults(self):
        PlatformConfig.objects.create(key='subjects', value=[])
        self.assertEqual(categories.get_categories()['subjects'], categories.DEFAULT_SUBJECTS)

    def test_subject_without_defaults_has_no_chapters(self):
        PlatformConfig.objects.create(key='subjects', value=['BIOLOGY'])
        self.assertEqual(categories.get_categories()['chapters'], {'BIOLOGY': []})


class CategoryUpdateTests(APITestCase):

    def setUp(self):
        self.client = APIClient()
        self.admin = make_admin()
        self.student = make_profile('student@test.com')

    def test_anonymous_update_is_unauthorized(self):
        response = self.client.put('/api/admin/categories/', {'type': 'classes', 'values': ['11']})
        self.assertEqual(response.status_code, 401)
        self.assertEqual(response.data['error'], 'Unauthorized')

    def test_student_update_is_forbidden(self):
        sign_in(self.client, self.student)
        response = self.client.put('/api/admin/categories/', {'type': 'classes', 'values': ['11']})
        self.assertEqual(response.status_code, 403)
        self.assertEqual(response.data['error'], 'Forbidden - Admin access required')

    def test_admin_replaces_classes(self):
        sign_in(self.client, self.admin)
        response = self.client.put('/api/admin/categories/', {'type': 'classes', 'values': ['11', '12']})
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.data, {'success': True})
        self.assertEqual(self.client.get('/api/categories/').data['classes'], ['11', '12'])

    def test_chapters_are_fully_replaced_in_order(self):
        sign_in(self.client, self.admin)
        self.client.put('/api/admin/categories/', {'type': 'chapters', 'subject': 'PHYSICS', 'values': ['Optics', 'Waves']})
        response = self.client.put(
            '/api/admin/categories/',
            {'type': 'chapters', 'subject': 'PHYSICS', 'values': ['Waves', 'Kinematics']},
        )
        self.assertEqual(response.status_code, 200)
        self.assertEqual(Chapter.objects.filter(subject='PHYSICS').count(), 2)
        self.assertEqual(categories.get_categories()['chapters']['PHYSICS'], ['Waves', 'Kinematics'])
        # other subjects keep their defaults
        self.assertEqual(
            categories.get_categories()['chapters']['CHEMISTRY'],
            categories.DEFAULT_CHAPTERS['CHEMISTRY'],
        )

    def test_classes_read_back_exactly_as_written(self):
        sign_in(self.client, self.admin)
        written = ['11', ' 12', '11']
        response = self.client.put('/api/admin/categories/', {'type': 'classes', 'values': written})
        self.assertEqual(response.status_code, 200)
        self.assertEqual(self.client.get('/api/categories/').data['classes'], written)

    def test_chapters_read_back_exactly_as_written(self):
        sign_in(self.client, self.admin)
        written = ['Optics ', 'Waves', 'Optics ']
        self.client.put('/api/admin/categories/', {'type': 'chapters', 'subject': 'PHYSICS', 'values': written})
        self.assertEqual(self.client.get('/api/categories/').data['chapters']['PHYSICS'], written)

    def test_blank_value_is_rejected(self):
        sign_in(self.client, self.admin)
        response = self.client.put('/api/admin/categories/', {'type': 'subjects', 'values': ['PHYSICS', '  ']})
        self.assertEqual(response.status_code, 400)
        self.assertIn('values', response.data['fields'])
        self.assertEqual(categories.get_categories()['subjects'], categories.DEFAULT_SUBJECTS)

    def test_unknown_type_is_rejected(self):
        sign_in(self.client, self.admin)
        response = self.client.put('/api/admin/categories/', {'type': 'topics', 'values': ['x']})
        self.assertEqual(response.status_code, 400)
        self.assertIn('Invalid type', response.data['error'])

    def test_chapters_require_subject(self):
        sign_in(self.client, self.admin)
        response = self.client.put('/api/admin/categories/', {'type': 'chapters', 'values': ['Optics']})
        self.assertEqual(response.status_code, 400)
        self.assertIn('subject', response.data['fields'])

    def test_empty_class_list_is_rejected(self):
        sign_in(self.client, self.admin)
        response = self.client.put('/api/admin/categories/', {'type': 'classes', 'values': []})
        self.assertEqual(response.status_code, 400)
        self.assertEqual(categories.get_categories()['classes'], categories.DEFAULT_CLASSES)
