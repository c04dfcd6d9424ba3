from __future__ import annotations

"""Message catalogs for image check results (EN/RU).

Templates take eight positional values: {0} data size, {1} width, {2} height,
{3} max data size, {4} min width, {5} min height, {6} max width,
{7} max height.
"""
from dataclasses import dataclass, field
from typing import Dict, Iterable


@dataclass
class Translator:
    default_locale: str = "en"
    _translations: Dict[str, Dict[str, str]] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if self._translations:
            return
        self._translations = {
            "en": {
                "image_check_result.gif_image": "Valid GIF image, {1}x{2} pixels, {0} bytes.",
                "image_check_result.jpeg_image": "Valid JPEG image, {1}x{2} pixels, {0} bytes.",
                "image_check_result.png_image": "Valid PNG image, {1}x{2} pixels, {0} bytes.",
                "image_check_result.flash_movie": "Flash (.swf) movies are not supported.",
                "image_check_result.unsupported_format": (
                    "Unsupported image format. Only JPEG, PNG and GIF images are accepted."
                ),
                "image_check_result.stream_read_error": "The file could not be read or is empty.",
                "image_check_result.data_size_too_high": (
                    "File size of {0} bytes exceeds the maximum of {3} bytes."
                ),
                "image_check_result.invalid_image": "The file is not a valid image.",
                "image_check_result.image_is_empty": "The image is empty ({1}x{2} pixels).",
                "image_check_result.size_mismatch": "The image must be exactly {4}x{5} pixels, got {1}x{2}.",
                "image_check_result.width_mismatch": "The image width must be exactly {4} pixels, got {1}.",
                "image_check_result.width_too_high": (
                    "The image width of {1} pixels exceeds the maximum of {6} pixels."
                ),
                "image_check_result.width_too_low": (
                    "The image width of {1} pixels is below the minimum of {4} pixels."
                ),
                "image_check_result.height_mismatch": "The image height must be exactly {5} pixels, got {2}.",
                "image_check_result.height_too_high": (
                    "The image height of {2} pixels exceeds the maximum of {7} pixels."
                ),
                "image_check_result.height_too_low": (
                    "The image height of {2} pixels is below the minimum of {5} pixels."
                ),
                "cli_timeout": "Check timed out.",
            },
            "ru": {
                "image_check_result.gif_image": "Корректное изображение GIF, {1}x{2} пикселей, {0} байт.",
                "image_check_result.jpeg_image": "Корректное изображение JPEG, {1}x{2} пикселей, {0} байт.",
                "image_check_result.png_image": "Корректное изображение PNG, {1}x{2} пикселей, {0} байт.",
                "image_check_result.flash_movie": "Flash-ролики (.swf) не поддерживаются.",
                "image_check_result.unsupported_format": (
                    "Неподдерживаемый формат. Допускаются только изображения JPEG, PNG и GIF."
                ),
                "image_check_result.stream_read_error": "Не удалось прочитать файл или он пуст.",
                "image_check_result.data_size_too_high": (
                    "Размер файла {0} байт превышает допустимые {3} байт."
                ),
                "image_check_result.invalid_image": "Файл не является корректным изображением.",
                "image_check_result.image_is_empty": "Изображение пустое ({1}x{2} пикселей).",
                "image_check_result.size_mismatch": (
                    "Размер изображения должен быть ровно {4}x{5} пикселей, получено {1}x{2}."
                ),
                "image_check_result.width_mismatch": (
                    "Ширина изображения должна быть ровно {4} пикселей, получено {1}."
                ),
                "image_check_result.width_too_high": (
                    "Ширина изображения {1} пикселей превышает максимум {6} пикселей."
                ),
                "image_check_result.width_too_low": (
                    "Ширина изображения {1} пикселей меньше минимума {4} пикселей."
                ),
                "image_check_result.height_mismatch": (
                    "Высота изображения должна быть ровно {5} пикселей, получено {2}."
                ),
                "image_check_result.height_too_high": (
                    "Высота изображения {2} пикселей превышает максимум {7} пикселей."
                ),
                "image_check_result.height_too_low": (
                    "Высота изображения {2} пикселей меньше минимума {5} пикселей."
                ),
                "cli_timeout": "Превышено время проверки.",
            },
        }

    @property
    def locales(self) -> Iterable[str]:
        return tuple(self._translations)

    def translate(self, key: str, locale: str | None = None) -> str:
        catalog = (
            self._translations.get(locale or self.default_locale)
            or self._translations.get(self.default_locale)
            or self._translations["en"]
        )
        return catalog.get(key, key)
