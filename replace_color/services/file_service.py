from __future__ import annotations

import os
from pathlib import Path
from typing import List


class FileService:
    def find_files(self, root_dir: str | Path, filename_suffix: str) -> List[str]:
        """Рекурсивно собирает пути файлов, имя которых оканчивается на суффикс.

        Сравнивается только имя файла (не полный путь), с учётом регистра.
        Содержимое файлов не открывается.

        Args:
            root_dir: Каталог, с которого начинается обход.
            filename_suffix: Окончание имени, например ".png".

        Returns:
            Отсортированный список полных путей.
        """
        root = os.path.abspath(root_dir)
        found: List[str] = []
        for dirpath, _dirnames, filenames in os.walk(root):
            for filename in filenames:
                if filename.endswith(filename_suffix):
                    found.append(os.path.join(dirpath, filename))
        found.sort()
        return found
