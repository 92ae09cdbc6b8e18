"""Static template catalog: (category, trigger patterns, response)."""
from __future__ import annotations

STATIC_TEMPLATES = (
    # greetings
    (
        "greeting",
        ("hello", "hi", "hey", "greetings"),
        "Hello! I'm your desktop assistant. Think of me as your digital sidekick.",
    ),
    (
        "greeting",
        ("what's up", "what up", "sup"),
        "Not much, just helping computer users! I've been waiting to help you out.",
    ),
    (
        "greeting",
        ("good morning", "good afternoon", "good evening"),
        "Good day to you too! How can I help with your computer today?",
    ),
    (
        "greeting",
        ("how are you", "how you doing", "how's it going"),
        "I'm doing great! I'm like a digital genie for your desktop, except with more "
        "knowledge and fewer wishes. How can I help you today?",
    ),
    # general questions
    (
        "general",
        ("what is", "what's", "whats", "what are"),
        "{{keyword0}} is an interesting topic. On a desktop computer, it relates to how we "
        "interact with applications and files through the graphical interface.",
    ),
    (
        "general",
        ("how do", "how can", "how to"),
        "To work with {{keyword0}}, you typically open the relevant application from your "
        "menu or desktop, then use the built-in tools or commands.",
    ),
    (
        "general",
        ("why",),
        "That's a good question about {{keyword0}}. Desktop systems were designed with "
        "friendly interfaces in mind, which shapes how these things work.",
    ),
    (
        "general",
        ("tell me about", "explain", "describe"),
        "{{keyword0}} is a fascinating aspect of computing. The approach on the desktop is "
        "intuitive and visual, following a philosophy of making technology accessible.",
    ),
    # platform topics
    (
        "platform",
        ("system", "operating system", "os"),
        "The operating system manages memory, files and every running program. Keeping it "
        "up to date brings new features and fixes for known problems.",
    ),
    (
        "platform",
        ("memory", "ram"),
        "Memory management is crucial. You can check available memory from the system "
        "menu, and adding more RAM can noticeably improve performance.",
    ),
    (
        "platform",
        ("disk", "floppy", "storage", "save"),
        "Disks hold everything you save. Always make backups of important files, and eject "
        "removable disks properly to avoid data loss.",
    ),
    (
        "platform",
        ("finder", "file manager"),
        "The Finder is the main file management application. It lets you organize files, "
        "launch applications and manage disks from the desktop.",
    ),
    (
        "platform",
        ("extension", "control panel", "startup item"),
        "Extensions and control panels add features at startup. Too many can cause "
        "conflicts or slow startup, so disable the ones you don't need.",
    ),
    (
        "platform",
        ("error", "crash", "freeze", "bomb"),
        "If you're experiencing errors or crashes, try restarting with extensions off. For "
        "persistent issues, reinstalling the system software often helps.",
    ),
    (
        "platform",
        ("apple menu", "menu bar"),
        "The menu bar runs along the top of the screen. Every application shares it, so "
        "commands like Open, Save and Quit are always in the same place.",
    ),
    # help and tips
    (
        "help",
        ("help", "assist"),
        "I'm here to help! You can ask about system features, troubleshooting, or how to "
        "accomplish specific tasks. What would you like to know more about?",
    ),
    (
        "help",
        ("tip", "trick", "shortcut"),
        "Here's a useful tip: Option-clicking a window's close box closes all windows of "
        "that application. Command-Shift-3 takes a picture of the whole screen.",
    ),
    (
        "help",
        ("keyboard", "shortcut", "key command"),
        "Keyboard shortcuts are consistent across applications: Command-X cuts, Command-C "
        "copies, Command-V pastes, Command-S saves and Command-P prints.",
    ),
    (
        "help",
        ("print", "printing", "printer"),
        "To print, make sure your printer is connected and selected in the Chooser. Then "
        "press Command-P in most applications to open the Print dialog.",
    ),
    (
        "help",
        ("backup", "back up"),
        "Regular backups are essential. Copy important files to a separate disk, label your "
        "backups clearly and store them somewhere safe.",
    ),
    (
        "help",
        ("customize", "personalize", "change"),
        "You can customize your desktop by changing its pattern, rearranging icons, making "
        "aliases for things you use often and adding sounds to system events.",
    ),
    # technical topics
    (
        "tech",
        ("network", "connect", "appletalk"),
        "Networking lets computers share files and printers. Turn on file sharing in the "
        "sharing settings and reach other machines through the Chooser.",
    ),
    (
        "tech",
        ("software", "application", "program", "app"),
        "Software usually arrives on disks or as an installer. Check its requirements first "
        "to make sure it is compatible with your system version.",
    ),
    (
        "tech",
        ("scsi", "peripheral", "external device"),
        "SCSI connects external devices. Each device needs a unique ID from 0 to 7, and the "
        "chain must be properly terminated.",
    ),
    (
        "tech",
        ("font", "typeface", "truetype"),
        "Install fonts by dragging them into the Fonts folder. TrueType fonts scale smoothly "
        "to any size on screen and on paper.",
    ),
    (
        "tech",
        ("virtual memory", "ram disk"),
        "Virtual memory uses hard disk space to extend the available RAM. It is slower than "
        "real memory but lets you run more applications at once.",
    ),
    (
        "tech",
        ("word process", "write", "document", "text"),
        "Word processors let you create, edit and format documents with different fonts and "
        "styles, and what you see on screen is what you get on paper.",
    ),
    (
        "tech",
        ("graphic", "draw", "paint", "image"),
        "Graphics software ranges from bitmap painting programs to vector drawing tools. "
        "These intuitive tools made the desktop popular with designers and artists.",
    ),
    (
        "general",
        ("game", "play", "entertainment"),
        "Classic desktop games include Dark Castle, Shufflepuck Cafe and Crystal Quest. "
        "Many of them can still be found in software archives.",
    ),
    # unsure responses, reached only through the low-score fallback
    (
        "unsure",
        (),
        "I'm not sure I understand your question about {{keyword0}}. Could you rephrase it, "
        "or ask something about features, software or troubleshooting?",
    ),
    (
        "unsure",
        (),
        "That's an interesting point about {{keyword0}}. Desktop computing has evolved a lot, "
        "and each system version brings new capabilities.",
    ),
    (
        "unsure",
        (),
        "I don't have specific information about {{keyword0}}, but I can help with system "
        "features, troubleshooting or productivity tips.",
    ),
    # time and date
    (
        "general",
        ("time", "what time"),
        "The current time is {{time}}. You can set the clock in the date and time settings.",
    ),
    (
        "general",
        ("date", "today", "what day"),
        "Today is {{date}}. Your computer keeps track of the date even when powered off "
        "thanks to a small battery on the motherboard.",
    ),
    (
        "general",
        ("calendar", "schedule", "appointment"),
        "A calendar application is the easiest way to manage your schedule. Today is {{date}}.",
    ),
    # personal queries
    (
        "general",
        ("your name", "who are you", "chatbot", "ai assistant"),
        "I'm an offline assistant that runs right on your computer. I can provide "
        "information and help with many parts of your system.",
    ),
    (
        "general",
        ("thank", "thanks"),
        "You're welcome! Happy to help with your questions anytime.",
    ),
    (
        "platform",
        ("history", "1984", "first mac", "steve jobs"),
        "The original Macintosh was introduced in 1984 with a famous commercial during the "
        "Super Bowl, and it introduced itself on stage at its launch.",
    ),
    # conversation continuers
    (
        "general",
        ("interesting", "fascinating", "wow"),
        "I'm glad you find that interesting! Is there anything specific about that topic "
        "you'd like to explore further?",
    ),
    (
        "general",
        ("tell me more", "more info", "elaborate"),
        "I'd be happy to elaborate! What specific aspect of {{keyword0}} would you like to "
        "know more about?",
    ),
    (
        "general",
        ("cool", "nice", "great", "awesome"),
        "Thanks! Is there anything else you'd like to know about?",
    ),
    # general knowledge
    (
        "general",
        ("science", "scientific", "experiment"),
        "Science builds knowledge through observation, hypotheses and experiments. Each "
        "result is tested and refined by others over time.",
    ),
    (
        "general",
        ("space", "planet", "astronomy"),
        "Our solar system has eight planets orbiting the Sun. Astronomy studies these and "
        "the countless stars and galaxies beyond them.",
    ),
    (
        "general",
        ("math", "mathematics", "number"),
        "Mathematics is the language of patterns and quantities. It underpins everything "
        "from simple arithmetic to the algorithms that run on your computer.",
    ),
    (
        "general",
        ("internet", "web", "online"),
        "The Internet is a global network connecting billions of devices. It grew out of "
        "ARPANET in the 1960s and spread through protocols like TCP/IP and HTTP.",
    ),
    (
        "general",
        ("programming", "coding", "developer"),
        "Programming means writing instructions for computers to follow, in languages like "
        "Python, C or JavaScript.",
    ),
    (
        "general",
        ("algorithm", "procedure", "process"),
        "Algorithms are step-by-step procedures for solving problems. They range from simple "
        "sorting routines to the systems that power machine learning.",
    ),
    (
        "general",
        ("artificial intelligence", "ai", "machine learning"),
        "Artificial intelligence lets machines perform tasks that usually need human "
        "intelligence. Machine learning improves through experience rather than explicit "
        "programming.",
    ),
    (
        "general",
        ("music", "song", "instrument"),
        "Music combines rhythm, melody and harmony. Computers have long been used to "
        "compose, record and play it back.",
    ),
    (
        "general",
        ("book", "reading", "novel"),
        "Reading opens doors to new ideas and worlds. Many classic novels are now available "
        "as electronic texts you can read on screen.",
    ),
    (
        "general",
        ("productivity", "efficiency", "time management"),
        "Productivity techniques like time blocking and focused work periods with breaks "
        "help you accomplish more with less stress.",
    ),
    (
        "general",
        ("goal", "achievement", "success"),
        "Specific, measurable goals provide direction. Breaking a big objective into smaller "
        "steps makes progress more manageable.",
    ),
)
