from typing import List

from structkit.patterns.composite import Directory, File


def run(playground: "structkit.core.playground.Playground") -> List[str]:  # noqa: F821
    music = Directory("Music")
    album = Directory("Red Hot Chili Peppers - Greatest Hits")
    music.add(album)

    album.add(File("Parallel Universe.mp3", 4_404_019))
    album.add(File("Dani California.mp3", 6_606_029))
    album.add(File("By The Way.mp3", 5_138_022))

    return music.describe().split("\n")
