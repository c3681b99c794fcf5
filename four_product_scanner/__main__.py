from four_product_scanner.cli import main

raise SystemExit(main())
