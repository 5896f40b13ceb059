# osvtools

Building blocks for matching software packages against OSV vulnerability
data:

- **Version comparison that follows each ecosystem's own rules**: semantic
  versions (as used by npm, crates.io, Go and others), NuGet, Maven,
  Packagist and PyPI.
- **Local vulnerability databases**: downloads, caches and loads zipped OSV
  archives. A cached copy is only downloaded again when its CRC32C checksum
  no longer matches the remote one. An offline mode reads the cache and
  nothing else.

The package needs only the Python standard library. It supports Python 3.10
and later.

## Comparing versions

Each ecosystem has a module under `osvtools.semantic`. The module provides a
parse function and a version class. The class has `compare(other)` and
`compare_str(text)`, and both return `-1`, `0` or `+1`:

| Module                       | Parse function                    | Class               |
|------------------------------|-----------------------------------|---------------------|
| `osvtools.semantic.semver`   | `parse_semver_version`            | `SemverVersion`     |
| `osvtools.semantic.semver`   | `parse_nuget_version`             | `NuGetVersion`      |
| `osvtools.semantic.maven`    | `parse_maven_version`             | `MavenVersion`      |
| `osvtools.semantic.packagist`| `parse_packagist_version`         | `PackagistVersion`  |
| `osvtools.semantic.pypi`     | `parse_pypi_version`              | `PyPIVersion`       |

```python
from osvtools.semantic.semver import parse_semver_version
from osvtools.semantic.maven import parse_maven_version
from osvtools.semantic.pypi import parse_pypi_version

parse_semver_version("1.2.3").compare_str("1.2.4")     # -1
parse_semver_version("1.2.3").compare_str("v1.2.3")    # 0
parse_maven_version("1.0-SNAPSHOT").compare_str("1.0") # -1
parse_pypi_version("1.0.dev0").compare_str("1.0a0")    # -1
```

Some details of each ecosystem:

- **Semantic versions** may have a leading `v` and any number of numeric
  components. `parse_semver_like_version(line, max_components)` returns the
  raw `SemverLikeVersion`. Components beyond the limit are moved into the
  build string, and a limit of `-1` keeps all of them. Semantic versions
  keep three components and NuGet versions keep four. Build metadata after
  `+` is ignored. A pre-release sorts before the release, and
  `compare_build_components(a, b)` compares pre-release strings. NuGet
  compares labels case-insensitively.
- **Maven** follows Maven's own ordering of qualifiers:
  `alpha < beta < milestone < rc < snapshot < release < sp`. `cr` counts as
  `rc`, and `ga`, `final` and `release` are the same as no qualifier.
- **Packagist** follows PHP's `version_compare`.
  `canonicalize_packagist_version` shows the dotted form that is compared.
- **PyPI** follows PEP 440 (epoch, release, pre, post, dev and local
  segments). Strings that are not valid PEP 440 are compared as legacy
  versions, and these always sort before PEP 440 versions.

`osvtools.semantic.version` holds the shared pieces: the abstract `Version`
base class, `compare_components(a, b)` for zero-padded numeric comparison,
and `parse_int(text)`.

## Local vulnerability databases

`osvtools.zipdb.new_zipped_db(db_base_path, name, url, offline)` creates a
`ZipDB` and loads it. The archive is cached at
`<db_base_path>/<name>/all.zip`:

```python
from osvtools.zipdb import new_zipped_db, OfflineDatabaseNotFoundError

db = new_zipped_db("/tmp/osv-cache", "PyPI", "https://example.com/PyPI/all.zip", False)
active = db.vulnerabilities(False)      # withdrawn records left out
everything = db.vulnerabilities(True)

try:
    new_zipped_db("/tmp/empty-cache", "npm", "https://example.com/npm/all.zip", True)
except OfflineDatabaseNotFoundError:
    print("no cached copy to work from")
```

When a cached copy exists and the database is online, a `HEAD` request reads
the `x-goog-hash` `crc32c=` header. The cache is used if its checksum
matches. Otherwise the archive is downloaded and the cache is overwritten. A
cached copy with no checksum header on the server is an error.

Only the `.json` entries of the archive are loaded. Records are plain
dictionaries parsed from the JSON. Entries that cannot be read are reported
on standard error and skipped. Only `http` and `https` URLs are accepted.
Any failure to fetch or read the archive raises `DatabaseFetchError`, and
`OfflineDatabaseNotFoundError` is a subclass of it. `ZipDB.load()` reloads a
database. `osvtools.zipdb.crc32c(data)` computes the Castagnoli checksum
that is used for the comparison.

## Wording helpers

`osvtools.output.form(count, singular, plural)` picks the word that suits a
count:

```python
from osvtools.output import form

f"found 1 {form(1, 'package', 'packages')}"   # 'found 1 package'
```

## What this package does not do

- Debian and RubyGems versions cannot be compared. There is also no single
  function that picks a version parser from an ecosystem name. Import the
  module for the ecosystem you need.
- SBOM documents (CycloneDX, SPDX) cannot be read.
- There is no command-line scanner. Matching records against packages,
  fetching from the OSV API and reporting are left to the caller.