"""
SPDX license-list-data I/O

Reads license definitions from a checkout of
https://github.com/spdx/license-list-data, converts their templates to LRE
documents, and writes the documents and matching test fixtures.

Layout of the checkout (configurable in settings):
    json/details/<id>.json    license definitions
    text/<id>.txt             plain license texts
"""

from pathlib import Path
from typing import Iterable, List, Optional, Set, Tuple

import yaml
from pydantic import ValidationError

from ..models.spdx import ConversionResult, ConversionStatus, SpdxLicense
from ..models.template import TranslationResult
from .log import LOG
from .translator import TemplateError, Translator

EXCLUDE_FILE = Path(__file__).parent.parent / "data" / "exclude.yaml"


class SpdxError(Exception):
    """Raised when SPDX data cannot be read or fixtures cannot be written"""
    pass


def excludes_load(extra_file: str = "") -> Set[str]:
    """
    Load the set of license IDs that are never written

    The built-in list ships with the package; `extra_file` names an
    optional YAML file in the same format whose IDs are added to it.

    Raises:
        SpdxError: If a list file cannot be read or has the wrong shape
    """
    excludes: Set[str] = set()
    for path in [EXCLUDE_FILE] + ([Path(extra_file)] if extra_file else []):
        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            raise SpdxError(f"{path}: {e}") from e

        ids = data.get("exclude") if isinstance(data, dict) else None
        if not isinstance(ids, list):
            raise SpdxError(f"{path}: expected an 'exclude' list of license IDs")
        excludes.update(str(i) for i in ids)
    return excludes


def licenseFiles_resolve(
    names: Iterable[str], inputdir: Path, details_dir: Path
) -> Tuple[List[Path], bool]:
    """
    Map command-line license names to JSON files

    A name ending in .json is a path relative to the input directory.
    Any other name is an SPDX identifier under the details directory. The
    single name "all" selects every JSON file in the details directory.

    Returns:
        (files, is_all)

    Example:
        >>> licenseFiles_resolve(["MIT"], Path("_spdx"), Path("_spdx/json/details"))
        ([PosixPath('_spdx/json/details/MIT.json')], False)
    """
    names = list(names)
    if names == ["all"]:
        return sorted(details_dir.glob("*.json")), True

    files = []
    for name in names:
        if name.endswith(".json"):
            files.append(inputdir / name)
        else:
            files.append(details_dir / f"{name}.json")
    return files, False


def license_load(path: Path) -> SpdxLicense:
    """
    Read one SPDX JSON license definition

    Raises:
        SpdxError: If the file cannot be read or is not a license definition
    """
    try:
        data = path.read_text(encoding="utf-8")
    except OSError as e:
        raise SpdxError(f"{path}: {e}") from e
    try:
        return SpdxLicense.model_validate_json(data)
    except ValidationError as e:
        raise SpdxError(f"{path}: {e}") from e


def lre_document(record: SpdxLicense, result: TranslationResult) -> str:
    """Prefix a translated body with the license header block"""
    return record.header_build() + result.body


def license_convert(
    path: Path,
    outputdir: Path,
    excludes: Set[str],
    force: bool = False,
    is_all: bool = False,
) -> ConversionResult:
    """
    Convert one SPDX JSON file into <outputdir>/<id>.lre

    Deprecated licenses are skipped. The template is always translated, so
    malformed templates are reported even for excluded IDs. Excluded IDs
    are never written, and an existing target is only replaced when
    `force` is set.

    Returns:
        ConversionResult describing what happened. Template and read errors
        are returned as FAILED results rather than raised.
    """
    try:
        record = license_load(path)
    except SpdxError as e:
        return ConversionResult(source=path, license_id="", status=ConversionStatus.FAILED, message=str(e))

    license_id = record.license_id
    if record.is_deprecated:
        LOG(f"{license_id}: deprecated", level=2 if is_all else 1)
        return ConversionResult(source=path, license_id=license_id, status=ConversionStatus.DEPRECATED)

    try:
        result = Translator(record.standard_license_template, source=str(path)).translate()
    except TemplateError as e:
        return ConversionResult(
            source=path, license_id=license_id, status=ConversionStatus.FAILED, message=str(e)
        )

    document = lre_document(record, result)
    target = outputdir / f"{license_id}.lre"
    converted = ConversionResult(
        source=path,
        license_id=license_id,
        status=ConversionStatus.WRITTEN,
        target=target,
        document=document,
        warning=result.warning,
    )

    if license_id in excludes:
        LOG(f"{license_id}: excluded", level=2)
        converted.status = ConversionStatus.EXCLUDED
        return converted

    if target.exists() and not force:
        LOG(f"{license_id}: {target} exists", level=2)
        converted.status = ConversionStatus.EXISTS
        return converted

    try:
        target.write_text(document, encoding="utf-8")
    except OSError as e:
        converted.status = ConversionStatus.FAILED
        converted.message = f"{target}: {e}"
        return converted

    LOG(f"{license_id}: wrote {target}", level=2)
    return converted


def fixtures_write(license_id: str, text_file: Path, testdata_dir: Path) -> Optional[Path]:
    """
    Write the license-text fixtures that accompany a generated LRE

    Copies the plain license text to <testdata>/licenses/<id>.txt and, if
    <testdata>/<id>.t1 does not exist yet, creates a scan test expecting a
    100% match of the whole text.

    Returns:
        Path of the newly created .t1 file, or None if it already existed

    Raises:
        SpdxError: If the license text cannot be read or fixtures written
    """
    try:
        text = text_file.read_text(encoding="utf-8")
    except OSError as e:
        raise SpdxError(f"{text_file}: {e}") from e

    licenses_dir = testdata_dir / "licenses"
    t1 = testdata_dir / f"{license_id}.t1"
    try:
        licenses_dir.mkdir(parents=True, exist_ok=True)
        (licenses_dir / f"{license_id}.txt").write_text(text, encoding="utf-8")
        if t1.exists():
            return None
        t1.write_text(f"0%\nscan\n100%\n{license_id} 100% 0,$\n\n{text}", encoding="utf-8")
    except OSError as e:
        raise SpdxError(f"{testdata_dir}: {e}") from e
    return t1
