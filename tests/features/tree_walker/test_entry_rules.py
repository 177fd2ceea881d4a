from npm_scrub.features.tree_walker.data.entry_rules import EntryRules


def test_only_exact_manifest_name_matches():
    assert EntryRules.is_manifest("package.json")
    assert not EntryRules.is_manifest("Package.json")
    assert not EntryRules.is_manifest("package.json.bak")
    assert not EntryRules.is_manifest("package-lock.json")
    assert not EntryRules.is_manifest("not_package.json")
