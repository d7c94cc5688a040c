#
# Tests for IDNA normalization of domain names
#

from unittest import TestCase

from octodns_glesys import GlesysClientValidationError, to_ascii


class TestToAscii(TestCase):
    def test_ascii_is_untouched(self):
        for name in ('sysgle.se', 'xn--bcher-kva.de', 'unit.tests.', 'Mixed.SE'):
            self.assertEqual(name, to_ascii(name))

    def test_idempotent(self):
        once = to_ascii('räksmörgås.josefsson.org')
        self.assertEqual('xn--rksmrgs-5wao1o.josefsson.org', once)
        self.assertEqual(once, to_ascii(once))

    def test_unicode_labels(self):
        self.assertEqual('xn--bcher-kva.de', to_ascii('bücher.de'))
        # UTS #46 mapping folds case before encoding
        self.assertEqual('xn--bcher-kva.de', to_ascii('BÜCHER.de'))

    def test_trailing_dot_kept(self):
        self.assertEqual('xn--bcher-kva.de.', to_ascii('bücher.de.'))

    def test_invalid(self):
        with self.assertRaises(GlesysClientValidationError) as ctx:
            to_ascii('☃.se')
        self.assertEqual('☃.se', ctx.exception.name)
        self.assertIn("Invalid domain name '☃.se'", str(ctx.exception))
