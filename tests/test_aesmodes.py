import pytest
from cryptography.hazmat.primitives import padding
from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes

from cryptolab.aesmodes import DecryptionError, decrypt_cbc, decrypt_ctr, main

CBC_KEY = bytes.fromhex("140b41b22a29beb4061bda66b6747e14")
CTR_KEY = bytes.fromhex("36f18357be4dbd77f050515c73fcf9f2")
IV = bytes(range(16))


def _cbc_encrypt(key, iv, data):
    encryptor = Cipher(algorithms.AES(key), modes.CBC(iv)).encryptor()
    return iv + encryptor.update(data) + encryptor.finalize()


def _pkcs7(data):
    padder = padding.PKCS7(128).padder()
    return padder.update(data) + padder.finalize()


def _ctr_encrypt(key, iv, data):
    encryptor = Cipher(algorithms.AES(key), modes.CTR(iv)).encryptor()
    return iv + encryptor.update(data) + encryptor.finalize()


def test_cbc_known_answer():
    ciphertext = bytes.fromhex(
        "4ca00ff4c898d61e1edbf1800618fb2828a226d160dad07883d04e008a7897ee"
        "2e4b7465d5290d0c0e6c6822236e1daafb94ffe0c5da05d9476be028ad7c1d81"
    )
    assert decrypt_cbc(CBC_KEY, ciphertext) == "Basic CBC mode encryption needs padding."


def test_ctr_known_answer():
    ciphertext = bytes.fromhex(
        "69dda8455c7dd4254bf353b773304eec0ec7702330098ce7f7520d1cbbb20fc3"
        "88d1b0adb5054dbd7370849dbf0b88d393f252e764f1f5f7ad97ef79d59ce29f"
        "5f51eeca32eabedd9afa9329"
    )
    assert (
        decrypt_ctr(CTR_KEY, ciphertext)
        == "CTR mode lets you build a stream cipher from a block cipher."
    )


def test_ctr_known_answer_partial_block():
    ciphertext = bytes.fromhex(
        "770b80259ec33beb2561358a9f2dc617"
        "e46218c0a53cbeca695ae45faa8952aa0e311bde9d4e01726d3184c34451"
    )
    assert decrypt_ctr(CTR_KEY, ciphertext) == "Always avoid the two time pad!"


@pytest.mark.parametrize("message", [b"a", b"sixteen byte msg", b"x" * 40])
def test_cbc_round_trip(message):
    ciphertext = _cbc_encrypt(CBC_KEY, IV, _pkcs7(message))
    assert decrypt_cbc(CBC_KEY, ciphertext) == message.decode()


def test_cbc_zero_last_byte_strips_nothing():
    block = b"fifteen chars!!\x00"
    assert decrypt_cbc(CBC_KEY, _cbc_encrypt(CBC_KEY, IV, block)) == block.decode()


@pytest.mark.parametrize("message", [b"", b"short", b"exactly sixteen!", b"y" * 37])
def test_ctr_round_trip(message):
    assert decrypt_ctr(CTR_KEY, _ctr_encrypt(CTR_KEY, IV, message)) == message.decode()


def test_ctr_counter_wraps_around():
    iv = b"\xff" * 16
    message = b"z" * 48
    assert decrypt_ctr(CTR_KEY, _ctr_encrypt(CTR_KEY, iv, message)) == message.decode()


def test_cbc_padding_longer_than_message_fails():
    block = b"A" * 15 + b"\xff"
    with pytest.raises(DecryptionError):
        decrypt_cbc(CBC_KEY, _cbc_encrypt(CBC_KEY, IV, block))


def test_cbc_invalid_utf8_fails():
    ciphertext = _cbc_encrypt(CBC_KEY, IV, _pkcs7(b"\xff\xfe\xfd"))
    with pytest.raises(DecryptionError):
        decrypt_cbc(CBC_KEY, ciphertext)


def test_ctr_invalid_utf8_fails():
    with pytest.raises(DecryptionError):
        decrypt_ctr(CTR_KEY, _ctr_encrypt(CTR_KEY, IV, b"\xc3"))


@pytest.mark.parametrize("length", [0, 16, 31, 33])
def test_cbc_rejects_bad_lengths(length):
    with pytest.raises(ValueError):
        decrypt_cbc(CBC_KEY, bytes(length))


def test_ctr_rejects_missing_iv():
    with pytest.raises(ValueError):
        decrypt_ctr(CTR_KEY, bytes(10))


def test_rejects_wrong_key_size():
    with pytest.raises(ValueError):
        decrypt_ctr(bytes(24), bytes(32))


def test_main_prints_all_questions(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert out.count("Question") == 4
    assert "Always avoid the two time pad!" in out