import unittest, pathlib, sys
from http import HTTPStatus
ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from vercheck.output import Appcast, Latest, Outdated, VersionCheck, new_outdated

class TestNewOutdated(unittest.TestCase):
    def setUp(self):
        self.check = VersionCheck(
            appcast=Appcast('https://example.com/appcast.xml', HTTPStatus.OK),
            current='2.0.0',
            latest=Latest(version='2.1.0', build='2100', suggested='2.1.0'),
        )

    def test_fields_copied(self):
        o = new_outdated('example', 'outdated', self.check)
        self.assertIsInstance(o, Outdated)
        self.assertEqual(o.name, 'example')
        self.assertEqual(o.appcast, 'https://example.com/appcast.xml')
        self.assertEqual(o.status_code, '200 OK')
        self.assertEqual(o.current_version, '2.0.0')
        self.assertEqual(o.status, 'outdated')
        self.assertEqual(o.latest_version, '2.1.0')
        self.assertEqual(o.latest_build, '2100')
        self.assertEqual(o.suggested_latest_version, '2.1.0')

    def test_plain_int_status(self):
        check = VersionCheck(appcast=Appcast('https://example.com/feed', 404))
        o = new_outdated('missing', 'unknown', check)
        self.assertEqual(o.status_code, '404 Not Found')
        self.assertEqual(o.latest_version, '')
        self.assertEqual(new_outdated('x', 'unknown', VersionCheck(Appcast('u', 599))).status_code, '599')

    def test_to_dict(self):
        data = new_outdated('example', 'updated', self.check).to_dict()
        self.assertEqual(data['status'], 'updated')
        self.assertEqual(data['suggested_latest_version'], '2.1.0')
        self.assertEqual(len(data), 8)

    def test_records_are_documented(self):
        for cls in (Appcast, Latest, VersionCheck, Outdated):
            # dataclass fills in a signature string when no docstring is written
            self.assertFalse(cls.__doc__.startswith(cls.__name__ + '('), cls.__name__)

if __name__ == '__main__':
    unittest.main()
