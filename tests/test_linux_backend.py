import sys
import os
import json
import unittest
from unittest import mock

# Add project root to path
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from drive_mounter.disk_manager import linux_backend
from drive_mounter.disk_manager.linux_backend import flatten_lsblk, parse_partitions
from drive_mounter.disk_manager.utils import run_command
from drive_mounter.services.errors import DeviceListingError

LSBLK_OUTPUT = {
    "blockdevices": [
        {"name": "loop0", "size": "4K", "fstype": "squashfs", "mountpoint": "/snap/x", "type": "loop"},
        {"name": "sda", "size": "931.5G", "fstype": None, "mountpoint": None, "type": "disk",
         "children": [
             {"name": "sda1", "size": "512M", "fstype": "vfat", "mountpoint": "/boot", "type": "part"},
             {"name": "sda2", "size": "931G", "fstype": "crypto_LUKS", "mountpoint": None, "type": "part",
              "children": [
                  {"name": "luks-root", "size": "931G", "fstype": "ext4", "mountpoint": "/", "type": "crypt"}
              ]}
         ]},
        {"name": "sdb", "size": "14.9G", "fstype": None, "mountpoint": None, "type": "disk"},
    ]
}

class TestFlattenLsblk(unittest.TestCase):
    def test_keeps_disk_children_only(self):
        listing = flatten_lsblk(LSBLK_OUTPUT)
        self.assertEqual([e["name"] for e in listing], ["sda1", "sda2"])

    def test_nulls_become_na_at_every_depth(self):
        listing = flatten_lsblk(LSBLK_OUTPUT)
        self.assertEqual(listing[1]["mountpoint"], "N/A")
        self.assertEqual(listing[1]["children"][0]["mountpoint"], "/")

    def test_rejects_unexpected_shape(self):
        with self.assertRaises(DeviceListingError):
            flatten_lsblk([])

    def test_malformed_children_are_fatal(self):
        bad_outputs = [
            {"blockdevices": ["sda"]},
            {"blockdevices": [{"name": "sda", "type": "disk", "children": {"name": "sda1"}}]},
            {"blockdevices": [{"name": "sda", "type": "disk", "children": ["sda1"]}]},
            {"blockdevices": [{"name": "sda", "type": "disk", "children": [
                {"name": "sda1", "size": "1G", "fstype": None, "mountpoint": None, "children": [7]}
            ]}]},
        ]
        for output in bad_outputs:
            with self.assertRaises(DeviceListingError, msg=repr(output)):
                flatten_lsblk(output)

class TestParsePartitions(unittest.TestCase):
    def test_builds_tree(self):
        text = json.dumps([
            {"name": "sdb1", "size": "14.9G", "fstype": "exfat", "mountpoint": "N/A"},
            {"name": "sda2", "size": "931G", "fstype": "N/A", "mountpoint": "N/A",
             "children": [{"name": "dm-0", "size": "931G", "fstype": "ext4", "mountpoint": "/"}]},
        ])
        partitions = parse_partitions(text)
        self.assertEqual(len(partitions), 2)
        self.assertEqual(partitions[0].filesystem_type, "exfat")
        self.assertFalse(partitions[0].is_mounted)
        self.assertEqual(partitions[0].children, [])
        self.assertEqual(partitions[1].children[0].mount_location, "/")
        self.assertEqual(partitions[1].address, "/dev/sda2")

    def test_malformed_json(self):
        with self.assertRaises(DeviceListingError):
            parse_partitions("[{")

    def test_schema_violations(self):
        bad_listings = [
            {"name": "sda1"},
            ["sda1"],
            [{"name": "sda1", "size": "1G", "fstype": "ext4"}],
            [{"name": "sda1", "size": "1G", "fstype": "ext4", "mountpoint": None}],
            [{"name": "sda1", "size": "1G", "fstype": "ext4", "mountpoint": "N/A", "children": {}}],
            [{"name": "sda1", "size": "1G", "fstype": "ext4", "mountpoint": "N/A", "children": [{"name": 3}]}],
        ]
        for listing in bad_listings:
            with self.assertRaises(DeviceListingError, msg=repr(listing)):
                parse_partitions(json.dumps(listing))

class TestParseLinuxPartitions(unittest.TestCase):
    @mock.patch.object(linux_backend, "run_command")
    def test_reads_lsblk(self, run):
        run.return_value = (True, json.dumps(LSBLK_OUTPUT))
        partitions = linux_backend.parse_linux_partitions()
        run.assert_called_once_with(linux_backend.LSBLK_COMMAND)
        self.assertEqual([p.name for p in partitions], ["sda1", "sda2"])
        self.assertEqual(partitions[1].children[0].name, "luks-root")

    @mock.patch.object(linux_backend, "run_command")
    def test_failed_lsblk_is_fatal(self, run):
        run.return_value = (False, "Command not found: lsblk")
        with self.assertRaises(DeviceListingError):
            linux_backend.parse_linux_partitions()

    @mock.patch.object(linux_backend, "run_command")
    def test_garbage_output_is_fatal(self, run):
        run.return_value = (True, "not json")
        with self.assertRaises(DeviceListingError):
            linux_backend.parse_linux_partitions()

class TestRunCommand(unittest.TestCase):
    @mock.patch("subprocess.run")
    def test_non_utf8_output_fails(self, run):
        run.return_value = mock.Mock(returncode=0, stdout=b"\xff\xfe", stderr=b"")
        success, output = run_command(["lsblk"])
        self.assertFalse(success)
        self.assertEqual(output, "got non UTF-8 data")

    @mock.patch("subprocess.run")
    def test_passes_stdin_and_strips(self, run):
        run.return_value = mock.Mock(returncode=0, stdout=b"sdb1\n", stderr=b"")
        success, output = run_command(["dmenu"], input_text="a\nb\n")
        self.assertTrue(success)
        self.assertEqual(output, "sdb1")
        self.assertEqual(run.call_args.kwargs["input"], b"a\nb\n")

    @mock.patch("subprocess.run", side_effect=FileNotFoundError)
    def test_missing_command(self, run):
        success, output = run_command(["rofi", "-dmenu"])
        self.assertFalse(success)
        self.assertIn("rofi", output)

if __name__ == '__main__':
    unittest.main()
