# cargonuget

This package takes a native dynamic library built from a Rust crate and
bundles it into a NuGet package (`.nupkg`) that .NET projects can use.

It reads the crate's `Cargo.toml` and writes a matching `.nuspec`
manifest. It then packs the manifest into a single zip archive together
with one native library per runtime identifier. The archive has the
layout NuGet expects:

```
[Content_Types].xml
_rels/.rels
<id>.nuspec
runtimes/<rid>/native/<id>.<ext>
```

## Supported targets

Runtime identifiers use the .NET naming scheme. The supported ones are
`win-x86`, `win-x64`, `osx-x86`, `osx-x64`, `linux-x86` and `linux-x64`.
The module `cargonuget.targets` models them with the `Platform`, `Arch`,
`CrossTarget` and `Target` types:

```python
from cargonuget.targets import Target

target = Target.from_rid("linux-x64")
target.rid()          # "linux-x64"
target.is_unknown()   # False

unknown = Target.from_rid("mcnuggets")
unknown.is_unknown()  # True
unknown.rid()         # "any"
```

`Target.local()` stands for the machine the code runs on. It counts as
unknown when that machine's platform or architecture has no matching
identifier.

## Building a package

Each step is a plain function, so the steps can be chained:

```python
from cargonuget.manifest import manifest_path, parse_toml_file
from cargonuget.package import pack_nuspec
from cargonuget.save import nupkg_path, save_nupkg
from cargonuget.spec import spec_from_config
from cargonuget.targets import Target

config = parse_toml_file(manifest_path("path/to/crate"))
nuspec = spec_from_config(config)
nupkg = pack_nuspec(nuspec, {
    Target.from_rid("linux-x64"): "path/to/crate/target/release/libnative.so",
})
save_nupkg(nupkg_path(nupkg.name, "out"), nupkg.buf)
```

### `cargonuget.manifest`

- `parse_toml` reads manifest text or bytes.
- `parse_toml_file` reads the manifest from a path.
- Both read the `[package]` fields `name`, `version`, `authors`,
  `repository` and `description`.
- `lib.crate-type` must contain `dylib` or `cdylib`. If it does not,
  `NotADylibError` is raised.
- A missing key raises `CargoKeyError`.
- All of these errors are subclasses of `CargoParseError`.
- `manifest_path(work_dir)` gives `Cargo.toml` inside `work_dir`, or in
  the current directory when no directory is given.

### `cargonuget.version`

`local_version_tag(version, now)` turns a version into a local
development version. For example, `0.1.0` becomes
`0.1.0-dev.<unix timestamp>`. The function:

- keeps an existing pre-release and appends the timestamp to it;
- drops any build metadata;
- raises `LocalVersionError` for an invalid version or a time before the
  epoch.

`add_pretag(version, tag, num)` is the underlying step.

### `cargonuget.spec`

- `spec(...)` and `spec_from_config(config)` produce the `.nuspec` XML
  as a `Nuspec`.
- When no dependencies are given, the package depends on
  `Microsoft.NETCore.Platforms` `[1.0.1, )`, which .NET needs to pick the
  right native binary at run time. This list is returned by
  `default_dependencies()`.
- `spec_from_config` joins the crate's authors with `", "`.

### `cargonuget.package`

- `pack(id, version, spec, libs)` and `pack_nuspec(nuspec, libs)` build
  a `Nupkg` holding `name`, `rids` and `buf`.
- The package is named `<id>.<version>.nupkg`.
- `libs` is a mapping from `Target` to a library path, or an iterable of
  such pairs.
- Unknown targets are skipped. If none is left, `NoValidTargetsError` is
  raised.
- A library file that cannot be read raises `WriteLibError`.

### `cargonuget.openxml`

`content_types()` and `relationships(nuspec_path)` return the OpenXML
parts as `(path, bytes)` pairs.

### `cargonuget.save`

- `nupkg_path(name, directory)` places the package file in a directory,
  or in the current one by default.
- `save_nupkg(path, data)` writes it there, replacing any existing file.
- It raises `NugetSaveError` on failure.

### `cargonuget.xmlwriter`

`XmlWriter` is the small streaming XML writer the other modules use. It
provides:

- `elem` as a context manager;
- `empty` and `val`;
- `getvalue()`, which returns the document as bytes.

## Logging

`cargonuget.logger.init()` sets up coloured console output for the
`cargonuget` logger:

- errors go to standard error in red;
- warnings are shown in yellow;
- debug messages are shown in blue;
- everything else is printed plainly.

`ColorFormatter` can also be used on its own handlers.

## What this package does not do

This package installs no command.

`cargonuget.targets.build_parser()` returns an `argparse` parser. It
defines the `pack` and `cross` subcommands and their options. Nothing in
the package acts on the parsed arguments.

The package never runs `cargo`, so it does not build or test the crate
itself. Build the library first, then pass the resulting file paths to
`pack`.

## Running the tests

Install the `test` extra, then run `pytest` from the project root.