from portal.models.berkas import Berkas
from portal.models.dosen import Dosen
from portal.models.pengumuman import Pengumuman

__all__ = ["Berkas", "Dosen", "Pengumuman"]
