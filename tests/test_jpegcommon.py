import pytest

from brickbreaker.jpegcommon import (
    CodecObject,
    CodecState,
    HuffTable,
    JpegError,
    QuantTable,
)


def test_initial_states():
    assert CodecObject().global_state is CodecState.COMPRESS_START
    assert CodecObject(is_decompressor=True).global_state is CodecState.DECOMPRESS_START


def test_quant_table_allocation():
    codec = CodecObject()
    table = codec.alloc_quant_table()
    assert isinstance(table, QuantTable)
    assert table.sent_table is False
    assert len(table.quantval) == 64
    assert table in codec.permanent


def test_huff_table_allocation():
    codec = CodecObject()
    table = codec.alloc_huff_table()
    assert isinstance(table, HuffTable)
    assert table.sent_table is False
    assert len(table.bits) == 17
    assert table in codec.permanent


def test_tables_are_distinct():
    codec = CodecObject()
    first = codec.alloc_quant_table()
    second = codec.alloc_quant_table()
    first.quantval[0] = 5
    assert second.quantval[0] == 0


def test_abort_resets_state_and_keeps_permanent():
    codec = CodecObject()
    table = codec.alloc_quant_table()
    codec.transient.append(object())
    codec.global_state = CodecState.COMPRESS_RUNNING
    codec.abort()
    assert codec.global_state is CodecState.COMPRESS_START
    assert codec.transient == []
    assert table in codec.permanent


def test_abort_decompressor():
    codec = CodecObject(is_decompressor=True)
    codec.global_state = CodecState.DECOMPRESS_RUNNING
    codec.abort()
    assert codec.global_state is CodecState.DECOMPRESS_START


def test_destroy_releases_everything():
    codec = CodecObject()
    codec.alloc_huff_table()
    codec.destroy()
    assert codec.global_state is CodecState.DESTROYED
    assert codec.permanent == []
    codec.destroy()
    assert codec.global_state is CodecState.DESTROYED


def test_use_after_destroy_raises():
    codec = CodecObject()
    codec.destroy()
    with pytest.raises(JpegError):
        codec.alloc_quant_table()
    with pytest.raises(JpegError):
        codec.abort()