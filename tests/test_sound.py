from gameboy.sound import SoundTrack


def test_missing_file_is_silent(tmp_path):
    track = SoundTrack(tmp_path / "menu.mp3", True)
    assert track.loaded is False
    track.play()
    assert track.playing is False


def test_resume_and_stop_on_silent_track(tmp_path):
    track = SoundTrack(tmp_path / "food.wav", False)
    track.resume()
    assert track.playing is False
    track.stop()
    assert track.playing is False


def test_loop_flag_kept(tmp_path):
    assert SoundTrack(tmp_path / "a.ogg", True).loop is True
    assert SoundTrack(tmp_path / "b.ogg", False).loop is False


def test_path_kept(tmp_path):
    path = tmp_path / "theme.ogg"
    assert SoundTrack(str(path), True).path == path