from tizen_i18n.cli import main

raise SystemExit(main())
