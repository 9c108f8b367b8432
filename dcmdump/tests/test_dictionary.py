# Copyright 2020-2024 dcmdump authors. See LICENSE file for details.
"""Test for datadict.py"""

import pytest

from dcmdump.datadict import (
    TagDictionary, TransferSyntaxDictionary, VRDictionary, extra_length_VRs,
    keyword_for_tag, tag_dictionary, tag_for_keyword,
    transfer_syntax_dictionary, vr_dictionary
)
from dcmdump.tag import BaseTag


class TestTagDictionary:
    def test_lookup_key(self):
        """Entries are found by 8 character tag key"""
        entry = tag_dictionary.lookup("00080018")
        assert "SOP Instance UID" == entry.name
        assert "UI" == entry.VR
        assert "1" == entry.VM
        assert "SOPInstanceUID" == entry.keyword

    def test_lookup_other_forms(self):
        assert "Patient's Name" == tag_dictionary.lookup(0x00100010).name
        assert "Patient's Name" == tag_dictionary.lookup((0x10, 0x10)).name
        assert "Item" == tag_dictionary.lookup(BaseTag(0xFFFEE000)).name

    def test_lookup_missing(self):
        """Unknown or malformed tags return None"""
        assert tag_dictionary.lookup("00091001") is None
        assert tag_dictionary.lookup("not a tag") is None
        assert tag_dictionary.lookup("123456789") is None
        assert tag_dictionary.lookup(-1) is None

    def test_contains(self):
        assert "7FE00010" in tag_dictionary
        assert 0x00091001 not in tag_dictionary
        assert len(tag_dictionary) > 100

    def test_custom_entries(self):
        """A dictionary can be built from custom entries"""
        tags = TagDictionary({0x00091001: ('LO', '1', "Test One", '', 'One')})
        assert "Test One" == tags.lookup("00091001").name
        assert tags.lookup("00080018") is None
        assert 0x00091001 == tags.tag_for_keyword("One")


class TestVRDictionary:
    @pytest.mark.parametrize(
        "VR, width",
        [
            ('AT', 2), ('FL', 4), ('FD', 8), ('OB', 1), ('OD', 8), ('OF', 4),
            ('OL', 4), ('OW', 2), ('SL', 4), ('SS', 2), ('UL', 4),
            ('US', 2),
        ]
    )
    def test_fixed_size(self, VR, width):
        entry = vr_dictionary.lookup(VR)
        assert entry.is_fixed_size
        assert width == entry.width

    @pytest.mark.parametrize(
        "VR", ['AE', 'AS', 'CS', 'DA', 'DS', 'DT', 'IS', 'LO', 'LT', 'PN',
               'SH', 'ST', 'TM', 'UC', 'UI', 'UR', 'UT']
    )
    def test_text(self, VR):
        entry = vr_dictionary.lookup(VR)
        assert not entry.is_fixed_size
        assert 0 == entry.width
        assert entry.is_padded

    def test_missing(self):
        assert vr_dictionary.lookup('ZZ') is None
        assert vr_dictionary.lookup('00') is None
        assert vr_dictionary.lookup(None) is None
        assert 'SQ' in vr_dictionary
        assert 'ZZ' not in vr_dictionary

    @pytest.mark.parametrize("VR", ['OV', 'SV', 'UV'])
    def test_64_bit_VRs_not_read(self, VR):
        """VRs with a long length form the decoder doesn't read are unknown"""
        assert VR not in vr_dictionary
        assert VR not in extra_length_VRs

    def test_long_length_VRs_known(self):
        for VR in extra_length_VRs:
            assert VR in vr_dictionary

    def test_custom(self):
        vrs = VRDictionary({'XX': (True, 3, False)})
        assert 3 == vrs.lookup('XX').width
        assert 1 == len(vrs)


class TestTransferSyntaxDictionary:
    def test_lookup(self):
        entry = transfer_syntax_dictionary.lookup("1.2.840.10008.1.2")
        assert "Implicit VR Little Endian" == entry.name
        assert "Transfer Syntax" == entry.type
        assert "ImplicitVRLittleEndian" == entry.keyword
        assert "1.2.840.10008.1.2.1" in transfer_syntax_dictionary

    def test_missing(self):
        assert transfer_syntax_dictionary.lookup("1.2.3.4") is None

    def test_custom(self):
        uids = TransferSyntaxDictionary(
            {'1.2.3.4': ('My Syntax', 'Transfer Syntax', '', '', 'Mine')}
        )
        assert "My Syntax" == uids.lookup("1.2.3.4").name
        assert "1.2.840.10008.1.2" not in uids


class TestAccessors:
    def test_tag_not_found(self):
        """keyword_for_tag returns blank string for unknown tag"""
        assert "" == keyword_for_tag(0x99991111)
        assert tag_for_keyword("NotAKeyword") is None

    def test_keywords(self):
        assert "PatientName" == keyword_for_tag(0x00100010)
        assert 0x00100010 == tag_for_keyword("PatientName")

