import pytest

from httpkit.options import (
    Authentication,
    AuthMode,
    Bearer,
    Body,
    Buffer,
    CertInfo,
    EncodedAuthentication,
    File,
    Files,
    HttpVersion,
    HttpVersionCode,
    LimitRate,
    LocalPort,
    Multipart,
    Part,
    ProxyAuthentication,
    ReserveSize,
    Resolve,
    UnixSocket,
)
from httpkit.util import url_decode


def test_authentication_keeps_credentials():
    password = "password"
    auth = Authentication("user", password, AuthMode.DIGEST)
    assert auth.username == "user"
    assert auth.password == password
    assert auth.auth_mode is AuthMode.DIGEST
    assert auth.auth_string == "user:" + password


def test_authentication_repr_hides_password():
    password = "password"
    auth = Authentication("user", password, AuthMode.BASIC)
    assert password not in repr(auth)


def test_bearer_token():
    assert Bearer("token").token == "token"
    assert Bearer("token") == Bearer("token")


def test_body_from_text_and_bytes():
    assert Body("x=5").data == "x=5".encode()
    assert Body(b"x=5") == Body("x=5")
    assert len(Body("message=abc123")) == len("message=abc123")


def test_body_from_buffer():
    buffer = Buffer(b"hello", "hello.txt")
    assert Body(buffer).data == b"hello"


def test_body_from_file(tmp_path):
    path = tmp_path / "body.txt"
    path.write_bytes(b"this is a file content.")
    assert Body.from_file(File(str(path))).data == b"this is a file content."
    assert Body(File(str(path))).data == b"this is a file content."


def test_body_from_missing_file_raises(tmp_path):
    with pytest.raises(ValueError):
        Body.from_file(File(str(tmp_path / "missing.txt")))


def test_body_rejects_other_types():
    with pytest.raises(TypeError):
        Body(123)


def test_buffer_length_and_name():
    buffer = Buffer(bytearray(b"abc"), "data.bin")
    assert buffer.datalen == 3
    assert buffer.filename.name == "data.bin"


def test_buffer_rejects_text():
    with pytest.raises(TypeError):
        Buffer("abc", "data.bin")


def test_cert_info_behaves_as_list():
    info = CertInfo(["Subject:a"])
    info.append("Issuer:b")
    assert list(info) == ["Subject:a", "Issuer:b"]
    assert info.pop() == "Issuer:b"


def test_file_overridden_filename():
    assert not File("a.txt").has_overridden_filename()
    assert File("a.txt", "b.txt").has_overridden_filename()


def test_files_converts_paths():
    files = Files(["a.txt", File("b.txt", "c.txt")])
    assert [f.filepath for f in files] == ["a.txt", "b.txt"]
    files.append("d.txt")
    assert files[-1] == File("d.txt")
    assert Files(File("x.txt")) == [File("x.txt")]


def test_http_version_default():
    assert HttpVersion().code is HttpVersionCode.VERSION_NONE
    assert HttpVersion(HttpVersionCode.VERSION_2_0).code is HttpVersionCode.VERSION_2_0


def test_limit_rate_fields():
    rate = LimitRate(1024, 512)
    assert (rate.downrate, rate.uprate) == (1024, 512)


def test_local_port():
    assert int(LocalPort(8080)) == 8080
    assert LocalPort(8080) == 8080
    with pytest.raises(ValueError):
        LocalPort(70000)
    with pytest.raises(ValueError):
        LocalPort(-1)


def test_part_values():
    assert Part("n", 42).value == str(42)
    text = Part("n", "v", "text/plain")
    assert (text.value, text.content_type, text.is_file, text.is_buffer) == ("v", "text/plain", False, False)


def test_part_with_files():
    part = Part("upload", Files(["a.txt", "b.txt"]))
    assert part.is_file and not part.is_buffer
    assert [f.filepath for f in part.files] == ["a.txt", "b.txt"]


def test_part_with_buffer():
    part = Part("upload", Buffer(b"abcd", "file.txt"))
    assert part.is_buffer
    assert part.value == "file.txt"
    assert part.data == b"abcd"
    assert part.datalen == 4


def test_part_rejects_unknown_value():
    with pytest.raises(TypeError):
        Part("n", 1.5)


def test_multipart_keeps_order():
    parts = [Part("a", "1"), Part("b", "2")]
    assert [p.name for p in Multipart(parts).parts] == ["a", "b"]


def test_encoded_authentication_round_trip():
    password = "password"
    auth = EncodedAuthentication("user name", password)
    assert " " not in auth.username
    assert url_decode(auth.username) == "user name"
    assert url_decode(auth.password) == password


def test_proxy_authentication_lookup():
    password = "password"
    proxy = ProxyAuthentication({"http": EncodedAuthentication("user", password)})
    assert proxy.has("http")
    assert not proxy.has("https")
    assert proxy.username("http") == "user"
    assert proxy.password("http") == password
    with pytest.raises(KeyError):
        proxy.username("https")


def test_reserve_size():
    assert ReserveSize(10).size == 10
    with pytest.raises(ValueError):
        ReserveSize(-1)


def test_resolve_ports():
    assert Resolve("example.com", "127.0.0.1").ports == {80, 443}
    assert Resolve("example.com", "127.0.0.1", set()).ports == {80, 443}
    assert Resolve("example.com", "127.0.0.1", {8080}).ports == {8080}


def test_unix_socket_path():
    sock = UnixSocket("/tmp/test.sock")
    assert sock.path == "/tmp/test.sock"
    assert str(sock) == "/tmp/test.sock"