"""Seed text used to train the Markov generator."""
from __future__ import annotations

SEED_TEXT = (
    "The Macintosh makes computing friendly and visual. The Macintosh uses "
    "windows, icons and menus instead of typed commands. The Finder shows your "
    "files as icons on the desktop.",
    "The Finder lets you open folders, move files and eject disks. The Finder "
    "is always running in the background. You can drag a file to the Trash to "
    "throw it away.",
    "Memory is precious on a small computer. Memory can be checked from the "
    "Apple menu. More memory lets you open more applications at the same time. "
    "Virtual memory uses the hard disk to pretend there is more memory.",
    "System software controls how the computer starts and runs. System "
    "extensions load when the computer starts. System updates can fix problems "
    "and add new features.",
    "Disk space fills up faster than you expect. Disk First Aid can repair a "
    "damaged disk. Always keep a backup disk of your important files.",
    "A printer needs the right driver before it will print. The printer can "
    "be chosen from the Chooser. Printing a long document can take a while.",
    "A network lets computers share files and printers. The network can be "
    "set up from the control panels. File sharing works over the network too.",
    "Software comes on floppy disks or on a compact disc. Software should be "
    "copied to the hard disk before you use it. Good software follows the "
    "same menus and shortcuts as every other program.",
    "Fonts make your documents look sharp on screen and on paper. A font can "
    "be installed by dragging it to the System Folder. TrueType fonts scale "
    "smoothly to any size.",
    "The keyboard has shortcuts for almost every menu command. Command and S "
    "saves your work. Command and Q quits the program you are using.",
    "The mouse moves the pointer around the screen. A single click selects an "
    "item and a double click opens it. Keep the mouse ball clean for smooth "
    "movement.",
    "A window can be moved by dragging its title bar. A window can be closed "
    "with the close box in its corner. Several windows can be open at once.",
    "I am happy to help you with your computer. I can explain menus, files, "
    "memory and printing. Ask me anything and I will do my best.",
    "Errors usually have a simple cause. Errors can come from conflicting "
    "extensions or low memory. Restarting with extensions off helps find the "
    "problem.",
)
