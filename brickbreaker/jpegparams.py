"""Default parameter setup for JPEG compression: quality, tables, colour spaces, scan scripts."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Sequence

from brickbreaker.jpegcommon import (
    DCT_SIZE2,
    HUFF_BITS_LENGTH,
    HUFF_VALUES_LENGTH,
    CodecObject,
    CodecState,
    HuffTable,
    JpegError,
)

NUM_QUANT_TBLS = 4
NUM_HUFF_TBLS = 4
NUM_ARITH_TBLS = 16
MAX_COMPONENTS = 10
MAX_COMPS_IN_SCAN = 4
BITS_IN_JSAMPLE = 8
DCT_DEFAULT = "islow"
MAX_QUANTIZER = 32767
MAX_BASELINE_QUANTIZER = 255


class ColorSpace(enum.IntEnum):
    """Colour spaces for source images and for the encoded stream."""

    UNKNOWN = 0
    GRAYSCALE = 1
    RGB = 2
    YCBCR = 3
    CMYK = 4
    YCCK = 5


@dataclass
class ComponentInfo:
    """Per-component identifier, sampling factors and table selectors."""

    component_id: int = 0
    h_samp_factor: int = 1
    v_samp_factor: int = 1
    quant_tbl_no: int = 0
    dc_tbl_no: int = 0
    ac_tbl_no: int = 0


@dataclass
class ScanInfo:
    """One scan of a progressive script."""

    comps_in_scan: int
    component_index: tuple[int, ...]
    Ss: int
    Se: int
    Ah: int
    Al: int


# Sample quantization tables from section K.1 of the JPEG standard.
STD_LUMINANCE_QUANT_TABLE: tuple[int, ...] = (
    16, 11, 10, 16, 24, 40, 51, 61,
    12, 12, 14, 19, 26, 58, 60, 55,
    14, 13, 16, 24, 40, 57, 69, 56,
    14, 17, 22, 29, 51, 87, 80, 62,
    18, 22, 37, 56, 68, 109, 103, 77,
    24, 35, 55, 64, 81, 104, 113, 92,
    49, 64, 78, 87, 103, 121, 120, 101,
    72, 92, 95, 98, 112, 100, 103, 99,
)

STD_CHROMINANCE_QUANT_TABLE: tuple[int, ...] = (
    17, 18, 24, 47, 99, 99, 99, 99,
    18, 21, 26, 66, 99, 99, 99, 99,
    24, 26, 56, 99, 99, 99, 99, 99,
    47, 66, 99, 99, 99, 99, 99, 99,
) + (99,) * 32

# Standard Huffman tables from section K.3; valid for 8-bit samples only.
BITS_DC_LUMINANCE: tuple[int, ...] = (0, 0, 1, 5, 1, 1, 1, 1, 1, 1, 0, 0, 0, 0, 0, 0, 0)
VAL_DC_LUMINANCE: tuple[int, ...] = tuple(range(12))

BITS_DC_CHROMINANCE: tuple[int, ...] = (0, 0, 3, 1, 1, 1, 1, 1, 1, 1, 1, 1, 0, 0, 0, 0, 0)
VAL_DC_CHROMINANCE: tuple[int, ...] = tuple(range(12))

BITS_AC_LUMINANCE: tuple[int, ...] = (0, 0, 2, 1, 3, 3, 2, 4, 3, 5, 5, 4, 4, 0, 0, 1, 0x7D)
VAL_AC_LUMINANCE: tuple[int, ...] = (
    0x01, 0x02, 0x03, 0x00, 0x04, 0x11, 0x05, 0x12,
    0x21, 0x31, 0x41, 0x06, 0x13, 0x51, 0x61, 0x07,
    0x22, 0x71, 0x14, 0x32, 0x81, 0x91, 0xA1, 0x08,
    0x23, 0x42, 0xB1, 0xC1, 0x15, 0x52, 0xD1, 0xF0,
    0x24, 0x33, 0x62, 0x72, 0x82, 0x09, 0x0A, 0x16,
    0x17, 0x18, 0x19, 0x1A, 0x25, 0x26, 0x27, 0x28,
    0x29, 0x2A, 0x34, 0x35, 0x36, 0x37, 0x38, 0x39,
    0x3A, 0x43, 0x44, 0x45, 0x46, 0x47, 0x48, 0x49,
    0x4A, 0x53, 0x54, 0x55, 0x56, 0x57, 0x58, 0x59,
    0x5A, 0x63, 0x64, 0x65, 0x66, 0x67, 0x68, 0x69,
    0x6A, 0x73, 0x74, 0x75, 0x76, 0x77, 0x78, 0x79,
    0x7A, 0x83, 0x84, 0x85, 0x86, 0x87, 0x88, 0x89,
    0x8A, 0x92, 0x93, 0x94, 0x95, 0x96, 0x97, 0x98,
    0x99, 0x9A, 0xA2, 0xA3, 0xA4, 0xA5, 0xA6, 0xA7,
    0xA8, 0xA9, 0xAA, 0xB2, 0xB3, 0xB4, 0xB5, 0xB6,
    0xB7, 0xB8, 0xB9, 0xBA, 0xC2, 0xC3, 0xC4, 0xC5,
    0xC6, 0xC7, 0xC8, 0xC9, 0xCA, 0xD2, 0xD3, 0xD4,
    0xD5, 0xD6, 0xD7, 0xD8, 0xD9, 0xDA, 0xE1, 0xE2,
    0xE3, 0xE4, 0xE5, 0xE6, 0xE7, 0xE8, 0xE9, 0xEA,
    0xF1, 0xF2, 0xF3, 0xF4, 0xF5, 0xF6, 0xF7, 0xF8,
    0xF9, 0xFA,
)

BITS_AC_CHROMINANCE: tuple[int, ...] = (0, 0, 2, 1, 2, 4, 4, 3, 4, 7, 5, 4, 4, 0, 1, 2, 0x77)
VAL_AC_CHROMINANCE: tuple[int, ...] = (
    0x00, 0x01, 0x02, 0x03, 0x11, 0x04, 0x05, 0x21,
    0x31, 0x06, 0x12, 0x41, 0x51, 0x07, 0x61, 0x71,
    0x13, 0x22, 0x32, 0x81, 0x08, 0x14, 0x42, 0x91,
    0xA1, 0xB1, 0xC1, 0x09, 0x23, 0x33, 0x52, 0xF0,
    0x15, 0x62, 0x72, 0xD1, 0x0A, 0x16, 0x24, 0x34,
    0xE1, 0x25, 0xF1, 0x17, 0x18, 0x19, 0x1A, 0x26,
    0x27, 0x28, 0x29, 0x2A, 0x35, 0x36, 0x37, 0x38,
    0x39, 0x3A, 0x43, 0x44, 0x45, 0x46, 0x47, 0x48,
    0x49, 0x4A, 0x53, 0x54, 0x55, 0x56, 0x57, 0x58,
    0x59, 0x5A, 0x63, 0x64, 0x65, 0x66, 0x67, 0x68,
    0x69, 0x6A, 0x73, 0x74, 0x75, 0x76, 0x77, 0x78,
    0x79, 0x7A, 0x82, 0x83, 0x84, 0x85, 0x86, 0x87,
    0x88, 0x89, 0x8A, 0x92, 0x93, 0x94, 0x95, 0x96,
    0x97, 0x98, 0x99, 0x9A, 0xA2, 0xA3, 0xA4, 0xA5,
    0xA6, 0xA7, 0xA8, 0xA9, 0xAA, 0xB2, 0xB3, 0xB4,
    0xB5, 0xB6, 0xB7, 0xB8, 0xB9, 0xBA, 0xC2, 0xC3,
    0xC4, 0xC5, 0xC6, 0xC7, 0xC8, 0xC9, 0xCA, 0xD2,
    0xD3, 0xD4, 0xD5, 0xD6, 0xD7, 0xD8, 0xD9, 0xDA,
    0xE2, 0xE3, 0xE4, 0xE5, 0xE6, 0xE7, 0xE8, 0xE9,
    0xEA, 0xF2, 0xF3, 0xF4, 0xF5, 0xF6, 0xF7, 0xF8,
    0xF9, 0xFA,
)


def _truncating_div(numerator: int, denominator: int) -> int:
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator >= 0) == (denominator > 0) else -quotient


def quality_scaling(quality: int) -> int:
    """Convert a 0..100 quality rating to a percentage scaling factor.

    Quality 50 uses the basic tables as they are (scaling 100); qualities
    above scale by ``200 - 2*Q``, those below by ``5000 / Q``.
    """
    quality = min(max(quality, 1), 100)
    if quality < 50:
        return 5000 // quality
    return 200 - quality * 2


def scaled_quant_values(
    basic_table: Sequence[int], scale_factor: int, force_baseline: bool
) -> list[int]:
    """Scale a 64-entry table by a percentage, limited to the valid range."""
    if len(basic_table) != DCT_SIZE2:
        raise ValueError(
            f"quantization table needs {DCT_SIZE2} entries, got {len(basic_table)}"
        )
    values = []
    for basic in basic_table:
        temp = _truncating_div(basic * scale_factor + 50, 100)
        temp = min(max(temp, 1), MAX_QUANTIZER)
        if force_baseline:
            temp = min(temp, MAX_BASELINE_QUANTIZER)
        values.append(temp)
    return values


class CompressParams(CodecObject):
    """Compression parameters with the standard default settings."""

    def __init__(
        self,
        in_color_space: ColorSpace = ColorSpace.UNKNOWN,
        input_components: int = 0,
    ) -> None:
        super().__init__(is_decompressor=False)
        self.in_color_space = in_color_space
        self.input_components = input_components
        self.jpeg_color_space = ColorSpace.UNKNOWN
        self.num_components = 0
        self.comp_info: list[ComponentInfo] | None = None
        self.quant_tbl_ptrs: list = [None] * NUM_QUANT_TBLS
        self.dc_huff_tbl_ptrs: list[HuffTable | None] = [None] * NUM_HUFF_TBLS
        self.ac_huff_tbl_ptrs: list[HuffTable | None] = [None] * NUM_HUFF_TBLS
        self.data_precision = 0
        self.arith_dc_L = [0] * NUM_ARITH_TBLS
        self.arith_dc_U = [0] * NUM_ARITH_TBLS
        self.arith_ac_K = [0] * NUM_ARITH_TBLS
        self.scan_info: list[ScanInfo] | None = None
        self.num_scans = 0
        self.raw_data_in = False
        self.arith_code = False
        self.optimize_coding = False
        self.CCIR601_sampling = False
        self.smoothing_factor = 0
        self.dct_method = DCT_DEFAULT
        self.restart_interval = 0
        self.restart_in_rows = 0
        self.density_unit = 0
        self.X_density = 0
        self.Y_density = 0
        self.write_JFIF_header = False
        self.write_Adobe_marker = False

    def _require_start(self) -> None:
        self._require_alive()
        if self.global_state is not CodecState.COMPRESS_START:
            raise JpegError(f"improper call in state {self.global_state.name}")

    def start(self) -> None:
        """Begin compressing; parameters can no longer be changed until abort."""
        self._require_start()
        self.global_state = CodecState.COMPRESS_RUNNING

    def add_quant_table(
        self,
        which: int,
        basic_table: Sequence[int],
        scale_factor: int,
        force_baseline: bool,
    ) -> None:
        """Define table ``which`` as ``basic_table`` scaled by a percentage."""
        self._require_start()
        if not 0 <= which < NUM_QUANT_TBLS:
            raise ValueError(f"quantization table number must be 0..{NUM_QUANT_TBLS - 1}")
        values = scaled_quant_values(basic_table, scale_factor, force_baseline)
        table = self.quant_tbl_ptrs[which]
        if table is None:
            table = self.alloc_quant_table()
            self.quant_tbl_ptrs[which] = table
        table.quantval = values
        table.sent_table = False

    def set_linear_quality(self, scale_factor: int, force_baseline: bool) -> None:
        """Set both standard tables with a straight percentage scaling."""
        self.add_quant_table(0, STD_LUMINANCE_QUANT_TABLE, scale_factor, force_baseline)
        self.add_quant_table(1, STD_CHROMINANCE_QUANT_TABLE, scale_factor, force_baseline)

    def set_quality(self, quality: int, force_baseline: bool) -> None:
        """Set the standard tables from a 0..100 quality rating."""
        self.set_linear_quality(quality_scaling(quality), force_baseline)

    def _add_huff_table(
        self, tables: list[HuffTable | None], index: int, bits: Sequence[int], values: Sequence[int]
    ) -> None:
        table = tables[index]
        if table is None:
            table = self.alloc_huff_table()
            tables[index] = table
        table.bits = list(bits[:HUFF_BITS_LENGTH])
        padded = list(values[:HUFF_VALUES_LENGTH])
        table.huffval = padded + [0] * (HUFF_VALUES_LENGTH - len(padded))
        table.sent_table = False

    def _std_huff_tables(self) -> None:
        self._add_huff_table(self.dc_huff_tbl_ptrs, 0, BITS_DC_LUMINANCE, VAL_DC_LUMINANCE)
        self._add_huff_table(self.ac_huff_tbl_ptrs, 0, BITS_AC_LUMINANCE, VAL_AC_LUMINANCE)
        self._add_huff_table(self.dc_huff_tbl_ptrs, 1, BITS_DC_CHROMINANCE, VAL_DC_CHROMINANCE)
        self._add_huff_table(self.ac_huff_tbl_ptrs, 1, BITS_AC_CHROMINANCE, VAL_AC_CHROMINANCE)

    def set_defaults(self) -> None:
        """Establish default values for every compression parameter."""
        self._require_start()
        if self.comp_info is None:
            self.comp_info = self._allocate(
                [ComponentInfo() for _ in range(MAX_COMPONENTS)], permanent=True
            )
        self.data_precision = BITS_IN_JSAMPLE
        self.set_quality(75, True)
        self._std_huff_tables()
        self.arith_dc_L = [0] * NUM_ARITH_TBLS
        self.arith_dc_U = [1] * NUM_ARITH_TBLS
        self.arith_ac_K = [5] * NUM_ARITH_TBLS
        self.scan_info = None
        self.num_scans = 0
        self.raw_data_in = False
        self.arith_code = False
        # The standard Huffman tables only suit 8-bit samples.
        self.optimize_coding = self.data_precision > 8
        self.CCIR601_sampling = False
        self.smoothing_factor = 0
        self.dct_method = DCT_DEFAULT
        self.restart_interval = 0
        self.restart_in_rows = 0
        self.density_unit = 0
        self.X_density = 1
        self.Y_density = 1
        self.default_colorspace()

    def default_colorspace(self) -> None:
        """Select the stream colour space that suits the input colour space."""
        mapping = {
            ColorSpace.GRAYSCALE: ColorSpace.GRAYSCALE,
            ColorSpace.RGB: ColorSpace.YCBCR,
            ColorSpace.YCBCR: ColorSpace.YCBCR,
            ColorSpace.CMYK: ColorSpace.CMYK,
            ColorSpace.YCCK: ColorSpace.YCCK,
            ColorSpace.UNKNOWN: ColorSpace.UNKNOWN,
        }
        try:
            target = mapping[self.in_color_space]
        except (KeyError, TypeError):
            raise JpegError(f"bogus input colorspace {self.in_color_space!r}") from None
        self.set_colorspace(target)

    def _set_comp(
        self, index: int, component_id: int, hsamp: int, vsamp: int, quant: int, dctbl: int, actbl: int
    ) -> None:
        assert self.comp_info is not None
        comp = self.comp_info[index]
        comp.component_id = component_id
        comp.h_samp_factor = hsamp
        comp.v_samp_factor = vsamp
        comp.quant_tbl_no = quant
        comp.dc_tbl_no = dctbl
        comp.ac_tbl_no = actbl

    def set_colorspace(self, colorspace: ColorSpace) -> None:
        """Set the stream colour space and its per-component defaults."""
        self._require_start()
        if self.comp_info is None:
            raise JpegError("component info is not allocated; call set_defaults first")
        self.jpeg_color_space = colorspace
        self.write_JFIF_header = False
        self.write_Adobe_marker = False

        if colorspace == ColorSpace.GRAYSCALE:
            self.write_JFIF_header = True
            self.num_components = 1
            self._set_comp(0, 1, 1, 1, 0, 0, 0)
        elif colorspace == ColorSpace.RGB:
            self.write_Adobe_marker = True
            self.num_components = 3
            self._set_comp(0, ord("R"), 1, 1, 0, 0, 0)
            self._set_comp(1, ord("G"), 1, 1, 0, 0, 0)
            self._set_comp(2, ord("B"), 1, 1, 0, 0, 0)
        elif colorspace == ColorSpace.YCBCR:
            self.write_JFIF_header = True
            self.num_components = 3
            self._set_comp(0, 1, 2, 2, 0, 0, 0)
            self._set_comp(1, 2, 1, 1, 1, 1, 1)
            self._set_comp(2, 3, 1, 1, 1, 1, 1)
        elif colorspace == ColorSpace.CMYK:
            self.write_Adobe_marker = True
            self.num_components = 4
            self._set_comp(0, ord("C"), 1, 1, 0, 0, 0)
            self._set_comp(1, ord("M"), 1, 1, 0, 0, 0)
            self._set_comp(2, ord("Y"), 1, 1, 0, 0, 0)
            self._set_comp(3, ord("K"), 1, 1, 0, 0, 0)
        elif colorspace == ColorSpace.YCCK:
            self.write_Adobe_marker = True
            self.num_components = 4
            self._set_comp(0, 1, 2, 2, 0, 0, 0)
            self._set_comp(1, 2, 1, 1, 1, 1, 1)
            self._set_comp(2, 3, 1, 1, 1, 1, 1)
            self._set_comp(3, 4, 2, 2, 0, 0, 0)
        elif colorspace == ColorSpace.UNKNOWN:
            self.num_components = self.input_components
            if not 1 <= self.num_components <= MAX_COMPONENTS:
                raise JpegError(
                    f"too many color components: {self.num_components}, max {MAX_COMPONENTS}"
                )
            for ci in range(self.num_components):
                self._set_comp(ci, ci, 1, 1, 0, 0, 0)
        else:
            raise JpegError(f"bogus JPEG colorspace {colorspace!r}")

    def simple_progression(self) -> None:
        """Create the recommended progressive scan script."""
        self._require_start()
        ncomps = self.num_components
        if ncomps == 3 and self.jpeg_color_space == ColorSpace.YCBCR:
            nscans = 10
        elif ncomps > MAX_COMPS_IN_SCAN:
            nscans = 6 * ncomps
        else:
            nscans = 2 + 4 * ncomps

        scans: list[ScanInfo] = []

        def a_scan(ci: int, ss: int, se: int, ah: int, al: int) -> None:
            scans.append(ScanInfo(1, (ci,), ss, se, ah, al))

        def each_scan(ss: int, se: int, ah: int, al: int) -> None:
            for ci in range(ncomps):
                a_scan(ci, ss, se, ah, al)

        def dc_scans(ah: int, al: int) -> None:
            if ncomps <= MAX_COMPS_IN_SCAN:
                scans.append(ScanInfo(ncomps, tuple(range(ncomps)), 0, 0, ah, al))
            else:
                each_scan(0, 0, ah, al)

        if ncomps == 3 and self.jpeg_color_space == ColorSpace.YCBCR:
            dc_scans(0, 1)
            a_scan(0, 1, 5, 0, 2)
            a_scan(2, 1, 63, 0, 1)
            a_scan(1, 1, 63, 0, 1)
            a_scan(0, 6, 63, 0, 2)
            a_scan(0, 1, 63, 2, 1)
            dc_scans(1, 0)
            a_scan(2, 1, 63, 1, 0)
            a_scan(1, 1, 63, 1, 0)
            a_scan(0, 1, 63, 1, 0)
        else:
            dc_scans(0, 1)
            each_scan(1, 5, 0, 2)
            each_scan(6, 63, 0, 2)
            each_scan(1, 63, 2, 1)
            dc_scans(1, 0)
            each_scan(1, 63, 1, 0)

        if len(scans) != nscans:
            raise JpegError("scan script size does not match its computed length")
        self.scan_info = self._allocate(scans, permanent=True)
        self.num_scans = nscans