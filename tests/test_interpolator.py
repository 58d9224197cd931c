import unittest, pathlib, sys
ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from vercheck.exceptions import ExtractionError
from vercheck.versioning import INTERPOLATION_METHODS, Version, interpolate_into_string

class TestInterpolateIntoString(unittest.TestCase):
    def setUp(self):
        self.version = Version('2.3.4')

    def test_bare_token(self):
        self.assertEqual(interpolate_into_string(self.version, 'app-#{version}.dmg'), 'app-2.3.4.dmg')

    def test_single_method(self):
        self.assertEqual(interpolate_into_string(self.version, 'file-#{version.major_minor}.zip'), 'file-2.3.zip')

    def test_method_chain(self):
        self.assertEqual(interpolate_into_string(self.version, 'v#{version.major_minor.no_dots}'), 'v23')
        self.assertEqual(interpolate_into_string(self.version, '#{version.dots_to_hyphens}'), '2-3-4')

    def test_multiple_tokens(self):
        template = 'https://dl.example.com/#{version.major}/app-#{version.no_dots}-#{version}.tar.gz'
        self.assertEqual(
            interpolate_into_string(self.version, template),
            'https://dl.example.com/2/app-234-2.3.4.tar.gz')

    def test_repeated_token(self):
        self.assertEqual(interpolate_into_string(self.version, '#{version.major}.#{version.major}'), '2.2')
        self.assertEqual(interpolate_into_string(self.version, '#{version}/#{version}'), '2.3.4/2.3.4')

    def test_comma_build(self):
        v = Version('1.2.3,100')
        self.assertEqual(v.interpolate_into_string('#{version.before_comma}-#{version.after_comma}'), '1.2.3-100')

    def test_unknown_method_returns_template(self):
        self.assertEqual(interpolate_into_string(self.version, 'file-#{version.bogus}.zip'), 'file-#{version.bogus}.zip')

    def test_unknown_method_discards_earlier_replacements(self):
        template = '#{version}-#{version.major}-#{version.major.bogus}'
        self.assertEqual(interpolate_into_string(self.version, template), template)

    def test_no_tokens_is_identity(self):
        for template in ('plain text', '{version}', '#{ver}', '', 'version 1.0'):
            self.assertEqual(interpolate_into_string(self.version, template), template)

    def test_extraction_error_propagates(self):
        with self.assertRaises(ExtractionError):
            interpolate_into_string(Version('5'), 'app-#{version.minor}.zip')

    def test_method_table_is_read_only(self):
        self.assertEqual(len(INTERPOLATION_METHODS), 12)
        with self.assertRaises(TypeError):
            INTERPOLATION_METHODS['upper'] = str.upper

if __name__ == '__main__':
    unittest.main()
